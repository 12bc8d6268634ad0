# -*- coding: utf-8 -*-
"""
sgc/modules/auth/services/auth_service.py

Capa de aplicación del módulo auth: registro, login, refresh de tokens y
bootstrap del super admin.

Autor: Equipo SGC
Fecha: 2026-09-16
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import commit_or_raise
from sgc.shared.utils.dates import now_utc
from sgc.shared.utils.security import verify_password
from sgc.modules.auth.enums import OrganizationPlan, UserRole
from sgc.modules.auth.facades.errors import (
    InvalidCredentials,
    InvalidToken,
    OrganizationNotFound,
)
from sgc.modules.auth.facades.plans import build_plan_settings
from sgc.modules.auth.facades.users import add_user, get_user_by_email
from sgc.modules.auth.models import AppUser, Organization
from sgc.modules.auth.schemas import RegisterIn, TokenPair
from sgc.modules.auth.security import (
    TOKEN_TYPE_REFRESH,
    TokenDecodeError,
    create_access_token,
    create_refresh_token,
    decode_token,
)

logger = logging.getLogger(__name__)


def issue_tokens(user: AppUser) -> TokenPair:
    return TokenPair(
        access_token=create_access_token(user.id, user.organization_id, user.role),
        refresh_token=create_refresh_token(user.id),
    )


class AuthService:
    """Registro, login y refresh. Async."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user(self, user_id: UUID) -> Optional[AppUser]:
        result = await self.db.execute(select(AppUser).where(AppUser.id == user_id))
        return result.scalars().first()

    async def get_active_user(self, user_id: UUID) -> Optional[AppUser]:
        """Usuario activo cuya organización también está activa."""
        user = await self.get_user(user_id)
        if user is None or not user.is_active:
            return None
        if user.organization is None or not user.organization.is_active:
            return None
        return user

    async def register(self, payload: RegisterIn) -> AppUser:
        """
        Registra un usuario con rol `user` en una organización existente.

        Raises:
            OrganizationNotFound: organización inexistente o inactiva
            UserAlreadyExists / UserLimitReached
        """

        async def _work() -> AppUser:
            organization = await self.db.get(Organization, payload.organization_id)
            if organization is None or not organization.is_active:
                raise OrganizationNotFound(payload.organization_id)
            return await add_user(
                self.db,
                organization,
                name=payload.name,
                email=payload.email,
                password=payload.password,
                role=UserRole.USER,
            )

        return await commit_or_raise(self.db, _work)

    async def login(self, email: str, password: str) -> Tuple[AppUser, TokenPair]:
        user = await get_user_by_email(self.db, email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Login fallido para %s", email)
            raise InvalidCredentials()
        if not user.is_active or not user.organization.is_active:
            logger.warning("Login de usuario inactivo %s", email)
            raise InvalidCredentials()

        async def _work() -> AppUser:
            user.last_login = now_utc()
            await self.db.flush()
            return user

        await commit_or_raise(self.db, _work)
        return user, issue_tokens(user)

    async def refresh(self, refresh_token: str) -> Tuple[AppUser, TokenPair]:
        try:
            payload = decode_token(refresh_token, expected_type=TOKEN_TYPE_REFRESH)
            user_id = UUID(str(payload["sub"]))
        except (TokenDecodeError, ValueError) as e:
            raise InvalidToken(str(e)) from e

        user = await self.get_active_user(user_id)
        if user is None:
            raise InvalidToken("Usuario inactivo o inexistente")
        return user, issue_tokens(user)


async def ensure_super_admin(
    db: AsyncSession,
    *,
    email: str,
    password: str,
    name: str,
    organization_name: str,
) -> Optional[AppUser]:
    """
    Crea la organización de plataforma y el usuario super_admin si no existen.

    Returns:
        El usuario creado, o None si ya existía un usuario con ese email.
    """
    if await get_user_by_email(db, email):
        return None

    async def _work() -> AppUser:
        result = await db.execute(select(Organization).where(Organization.name == organization_name))
        organization = result.scalars().first()
        if organization is None:
            organization = Organization(
                name=organization_name,
                plan=OrganizationPlan.ENTERPRISE,
                settings=build_plan_settings(OrganizationPlan.ENTERPRISE),
                is_active=True,
            )
            db.add(organization)
            await db.flush()
        return await add_user(
            db,
            organization,
            name=name,
            email=email,
            password=password,
            role=UserRole.SUPER_ADMIN,
        )

    user = await commit_or_raise(db, _work)
    logger.info("Super admin inicial creado: %s", email)
    return user


__all__ = ["AuthService", "issue_tokens", "ensure_super_admin"]
