# -*- coding: utf-8 -*-
"""
sgc/modules/auth/facades/users.py

Operaciones de persistencia sobre usuarios compartidas por el registro
público y la consola de super admin.

Autor: Equipo SGC
Fecha: 2026-09-16
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.utils.security import hash_password
from sgc.modules.auth.enums import UserRole
from sgc.modules.auth.models import AppUser, Organization
from sgc.modules.auth.facades.errors import UserAlreadyExists, UserLimitReached
from sgc.modules.auth.facades.plans import MAX_USERS_BY_PLAN

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[AppUser]:
    result = await db.execute(select(AppUser).where(AppUser.email == email.strip().lower()))
    return result.scalars().first()


async def count_active_users(db: AsyncSession, organization_id: UUID) -> int:
    stmt = select(func.count()).select_from(AppUser).where(
        AppUser.organization_id == organization_id,
        AppUser.is_active.is_(True),
    )
    return int((await db.execute(stmt)).scalar_one())


async def add_user(
    db: AsyncSession,
    organization: Organization,
    *,
    name: str,
    email: str,
    password: str,
    role: UserRole,
    duplicate_message: str = "El usuario ya existe",
) -> AppUser:
    """
    Crea un usuario en la organización (flush, sin commit).

    Raises:
        UserAlreadyExists: email ya registrado (en cualquier organización)
        UserLimitReached: la organización ya tiene max_users usuarios activos
    """
    email = email.strip().lower()
    if await get_user_by_email(db, email):
        raise UserAlreadyExists(email, duplicate_message)

    max_users = int(
        (organization.settings or {}).get("max_users")
        or MAX_USERS_BY_PLAN[organization.plan]
    )
    if await count_active_users(db, organization.id) >= max_users:
        raise UserLimitReached(max_users)

    user = AppUser(
        organization=organization,
        organization_id=organization.id,
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=role,
        is_active=True,
    )
    db.add(user)
    await db.flush()
    logger.info("Usuario creado id=%s org=%s role=%s", user.id, organization.id, role)
    return user


__all__ = ["get_user_by_email", "count_active_users", "add_user"]
