# -*- coding: utf-8 -*-
"""
sgc/modules/super_admin/services/super_admin_service.py

Servicio de la consola de super admin.

Opera sobre todas las organizaciones (sin filtro multi-organización):
- Dashboard con totales, organizaciones por plan y actividad reciente
- Alta de organización junto con su usuario administrador
- Cambio de plan (recalcula settings), baja lógica en cascada a usuarios
- Gestión de rol y estado de usuarios

Autor: Equipo SGC
Fecha: 2026-09-22
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import case, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import commit_or_raise
from sgc.modules.auth.enums import ASSIGNABLE_ROLES, OrganizationPlan, UserRole
from sgc.modules.auth.facades.errors import (
    InvalidRole,
    OrganizationAlreadyExists,
    OrganizationNotFound,
    UserLimitReached,
    UserNotFound,
)
from sgc.modules.auth.facades.plans import MAX_USERS_BY_PLAN, build_plan_settings
from sgc.modules.auth.facades.users import add_user, count_active_users
from sgc.modules.auth.models import AppUser, Organization
from sgc.modules.super_admin.facades.errors import OperacionNoPermitida
from sgc.modules.super_admin.schemas import OrganizationCreateIn, OrganizationUpdateIn

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_LIMIT = 10

DUPLICATE_EMAIL_MESSAGE = "Ya existe un usuario con ese email"


class SuperAdminService:
    def __init__(self, db: AsyncSession):
        self.db = db

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------
    async def dashboard(self) -> Dict[str, Any]:
        org_row = (
            await self.db.execute(
                select(
                    func.count(Organization.id),
                    func.coalesce(func.sum(case((Organization.is_active.is_(True), 1), else_=0)), 0),
                )
            )
        ).one()
        user_row = (
            await self.db.execute(
                select(
                    func.count(AppUser.id),
                    func.coalesce(func.sum(case((AppUser.is_active.is_(True), 1), else_=0)), 0),
                )
            )
        ).one()

        por_plan = {p.value: 0 for p in OrganizationPlan}
        for plan, total in (
            await self.db.execute(select(Organization.plan, func.count()).group_by(Organization.plan))
        ).all():
            por_plan[str(plan)] = int(total)

        recientes = (
            await self.db.execute(
                select(AppUser).order_by(AppUser.created_at.desc()).limit(RECENT_ACTIVITY_LIMIT)
            )
        ).scalars().all()

        return {
            "total_organizations": int(org_row[0]),
            "active_organizations": int(org_row[1]),
            "total_users": int(user_row[0]),
            "active_users": int(user_row[1]),
            "organizations_by_plan": por_plan,
            "recent_activity": [
                {
                    "user_id": u.id,
                    "name": u.name,
                    "email": u.email,
                    "role": u.role,
                    "organization_id": u.organization_id,
                    "organization_name": u.organization.name if u.organization else None,
                    "created_at": u.created_at,
                }
                for u in recientes
            ],
        }

    async def _user_stats(self, organization_ids: Optional[List[UUID]] = None) -> Dict[UUID, Dict[str, int]]:
        stmt = select(
            AppUser.organization_id,
            func.count(AppUser.id),
            func.coalesce(func.sum(case((AppUser.is_active.is_(True), 1), else_=0)), 0),
        ).group_by(AppUser.organization_id)
        if organization_ids is not None:
            stmt = stmt.where(AppUser.organization_id.in_(organization_ids))
        return {
            org_id: {"total_users": int(total), "active_users": int(activos)}
            for org_id, total, activos in (await self.db.execute(stmt)).all()
        }

    async def list_organizations(self) -> List[Tuple[Organization, Dict[str, int]]]:
        organizations = (
            await self.db.execute(select(Organization).order_by(Organization.created_at.desc()))
        ).scalars().all()
        stats = await self._user_stats()
        vacio = {"total_users": 0, "active_users": 0}
        return [(o, stats.get(o.id, vacio)) for o in organizations]

    async def get_organization(self, organization_id: UUID) -> Organization:
        organization = await self.db.get(Organization, organization_id)
        if organization is None:
            raise OrganizationNotFound(organization_id)
        return organization

    async def get_organization_with_stats(self, organization_id: UUID) -> Tuple[Organization, Dict[str, int]]:
        organization = await self.get_organization(organization_id)
        stats = await self._user_stats([organization_id])
        return organization, stats.get(organization_id, {"total_users": 0, "active_users": 0})

    async def list_organization_users(self, organization_id: UUID) -> Sequence[AppUser]:
        await self.get_organization(organization_id)
        result = await self.db.execute(
            select(AppUser)
            .where(AppUser.organization_id == organization_id)
            .order_by(AppUser.created_at.asc())
        )
        return result.scalars().all()

    # ------------------------------------------------------------------
    # Organizaciones
    # ------------------------------------------------------------------
    async def _assert_name_disponible(self, name: str, exclude_id: Optional[UUID] = None) -> None:
        stmt = select(Organization.id).where(func.lower(Organization.name) == name.strip().lower())
        if exclude_id is not None:
            stmt = stmt.where(Organization.id != exclude_id)
        if (await self.db.execute(stmt)).first() is not None:
            raise OrganizationAlreadyExists(name)

    async def create_organization(self, payload: OrganizationCreateIn) -> Tuple[Organization, AppUser]:
        async def _work() -> Tuple[Organization, AppUser]:
            await self._assert_name_disponible(payload.name)
            organization = Organization(
                name=payload.name,
                plan=payload.plan,
                contact_email=payload.contact_email,
                settings=build_plan_settings(payload.plan),
                is_active=True,
            )
            self.db.add(organization)
            await self.db.flush()
            admin = await add_user(
                self.db,
                organization,
                name=payload.admin_name,
                email=payload.admin_email,
                password=payload.admin_password,
                role=UserRole.ADMIN,
                duplicate_message=DUPLICATE_EMAIL_MESSAGE,
            )
            return organization, admin

        try:
            organization, admin = await commit_or_raise(self.db, _work)
        except IntegrityError as e:
            raise OrganizationAlreadyExists(payload.name) from e
        logger.info(
            "Organización creada id=%s plan=%s admin=%s", organization.id, organization.plan, admin.email
        )
        return organization, admin

    async def update_organization(self, organization_id: UUID, payload: OrganizationUpdateIn) -> Organization:
        changes = {
            k: v for k, v in payload.model_dump(exclude_unset=True).items()
            if v is not None or k == "contact_email"
        }

        async def _work() -> Organization:
            organization = await self.get_organization(organization_id)
            if "name" in changes and changes["name"] != organization.name:
                await self._assert_name_disponible(changes["name"], organization.id)
            if "plan" in changes and changes["plan"] != organization.plan:
                organization.settings = build_plan_settings(changes["plan"])
            for field, value in changes.items():
                setattr(organization, field, value)
            await self.db.flush()
            return organization

        try:
            organization = await commit_or_raise(self.db, _work)
        except IntegrityError as e:
            raise OrganizationAlreadyExists(changes.get("name", "")) from e
        logger.info("Organización actualizada id=%s campos=%s", organization_id, sorted(changes))
        return organization

    async def delete_organization(self, organization_id: UUID, *, requested_by: UUID) -> int:
        """Baja lógica de la organización y de todos sus usuarios. Devuelve usuarios desactivados."""

        async def _work() -> int:
            organization = await self.get_organization(organization_id)
            solicitante = await self.db.get(AppUser, requested_by)
            if solicitante is not None and solicitante.organization_id == organization.id:
                raise OperacionNoPermitida("No se puede eliminar la organización del super administrador")
            organization.is_active = False
            result = await self.db.execute(
                update(AppUser)
                .where(AppUser.organization_id == organization.id, AppUser.is_active.is_(True))
                .values(is_active=False)
                .execution_options(synchronize_session="fetch")
            )
            await self.db.flush()
            return int(result.rowcount or 0)

        desactivados = await commit_or_raise(self.db, _work)
        logger.info("Organización dada de baja id=%s usuarios_desactivados=%s", organization_id, desactivados)
        return desactivados

    # ------------------------------------------------------------------
    # Usuarios
    # ------------------------------------------------------------------
    async def _get_user(self, user_id: UUID) -> AppUser:
        user = await self.db.get(AppUser, user_id)
        if user is None:
            raise UserNotFound(user_id)
        if user.role == UserRole.SUPER_ADMIN:
            raise OperacionNoPermitida("No se puede modificar un super administrador desde la consola")
        return user

    async def update_user_role(self, user_id: UUID, role: str) -> AppUser:
        try:
            nuevo = UserRole(role)
        except ValueError as e:
            raise InvalidRole(role) from e
        if nuevo not in ASSIGNABLE_ROLES:
            raise InvalidRole(role)

        async def _work() -> AppUser:
            user = await self._get_user(user_id)
            user.role = nuevo
            await self.db.flush()
            return user

        user = await commit_or_raise(self.db, _work)
        logger.info("Rol de usuario actualizado id=%s role=%s", user_id, nuevo)
        return user

    async def update_user_status(self, user_id: UUID, is_active: bool) -> AppUser:
        async def _work() -> AppUser:
            user = await self._get_user(user_id)
            if is_active and not user.is_active:
                organization = await self.get_organization(user.organization_id)
                max_users = int(
                    (organization.settings or {}).get("max_users") or MAX_USERS_BY_PLAN[organization.plan]
                )
                if await count_active_users(self.db, organization.id) >= max_users:
                    raise UserLimitReached(max_users)
            user.is_active = is_active
            await self.db.flush()
            return user

        user = await commit_or_raise(self.db, _work)
        logger.info("Estado de usuario actualizado id=%s is_active=%s", user_id, is_active)
        return user


__all__ = ["SuperAdminService", "RECENT_ACTIVITY_LIMIT"]
