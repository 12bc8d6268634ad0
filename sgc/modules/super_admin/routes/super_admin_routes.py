# -*- coding: utf-8 -*-
"""
sgc/modules/super_admin/routes/super_admin_routes.py

Endpoints de la consola de super admin. Todo el router exige rol
super_admin.

Autor: Equipo SGC
Fecha: 2026-09-22
"""

from __future__ import annotations

import logging
from typing import Dict
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from sgc.modules.auth.dependencies import CurrentUser, require_super_admin
from sgc.modules.auth.facades.errors import (
    InvalidRole,
    OrganizationAlreadyExists,
    OrganizationNotFound,
    UserAlreadyExists,
    UserLimitReached,
    UserNotFound,
)
from sgc.modules.auth.schemas import OrganizationRead, UserRead
from sgc.modules.auth.models import Organization
from sgc.modules.super_admin.facades.errors import OperacionNoPermitida
from sgc.modules.super_admin.routes.deps import get_super_admin_service
from sgc.modules.super_admin.schemas import (
    DashboardRead,
    OrganizationCreateIn,
    OrganizationCreatedResponse,
    OrganizationListResponse,
    OrganizationResponse,
    OrganizationUpdateIn,
    OrganizationUsersResponse,
    OrganizationWithStats,
    UserRoleIn,
    UserStatusIn,
)
from sgc.modules.super_admin.services import SuperAdminService

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["super-admin"],
    dependencies=[Depends(require_super_admin)],
)

_DOMAIN_ERRORS = (
    OrganizationNotFound,
    UserNotFound,
    OrganizationAlreadyExists,
    UserAlreadyExists,
    UserLimitReached,
    InvalidRole,
    OperacionNoPermitida,
)


def _to_http(e: Exception) -> HTTPException:
    if isinstance(e, OrganizationNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Organización no encontrada")
    if isinstance(e, UserNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuario no encontrado")
    if isinstance(e, (OrganizationAlreadyExists, UserAlreadyExists, UserLimitReached)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    logger.warning("Operación de consola rechazada: %s", e)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def _with_stats(organization: Organization, stats: Dict[str, int]) -> OrganizationWithStats:
    return OrganizationWithStats(
        **OrganizationRead.model_validate(organization).model_dump(),
        stats=stats,
    )


@router.get("/dashboard", response_model=DashboardRead, summary="Resumen de la plataforma")
async def dashboard(svc: SuperAdminService = Depends(get_super_admin_service)):
    return DashboardRead(**await svc.dashboard())


# ---------------------------------------------------------------------------
# Organizaciones
# ---------------------------------------------------------------------------
@router.get("/organizations", response_model=OrganizationListResponse)
async def list_organizations(svc: SuperAdminService = Depends(get_super_admin_service)):
    rows = await svc.list_organizations()
    return OrganizationListResponse(items=[_with_stats(o, s) for o, s in rows], total=len(rows))


@router.get("/organizations/{organization_id}", response_model=OrganizationWithStats)
async def get_organization(
    organization_id: UUID,
    svc: SuperAdminService = Depends(get_super_admin_service),
):
    try:
        organization, stats = await svc.get_organization_with_stats(organization_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _with_stats(organization, stats)


@router.post(
    "/organizations",
    response_model=OrganizationCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_organization(
    payload: OrganizationCreateIn,
    svc: SuperAdminService = Depends(get_super_admin_service),
):
    try:
        organization, admin = await svc.create_organization(payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return OrganizationCreatedResponse(
        message="Organización creada exitosamente",
        organization=_with_stats(organization, {"total_users": 1, "active_users": 1}),
        admin_user=UserRead.model_validate(admin),
    )


@router.put("/organizations/{organization_id}", response_model=OrganizationResponse)
async def update_organization(
    organization_id: UUID,
    payload: OrganizationUpdateIn,
    svc: SuperAdminService = Depends(get_super_admin_service),
):
    try:
        await svc.update_organization(organization_id, payload)
        organization, stats = await svc.get_organization_with_stats(organization_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return OrganizationResponse(
        message="Organización actualizada exitosamente", organization=_with_stats(organization, stats)
    )


@router.delete("/organizations/{organization_id}")
async def delete_organization(
    organization_id: UUID,
    user: CurrentUser = Depends(require_super_admin),
    svc: SuperAdminService = Depends(get_super_admin_service),
):
    try:
        desactivados = await svc.delete_organization(organization_id, requested_by=user.user_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return {
        "success": True,
        "message": "Organización eliminada exitosamente",
        "users_deactivated": desactivados,
    }


@router.get("/organizations/{organization_id}/users", response_model=OrganizationUsersResponse)
async def list_organization_users(
    organization_id: UUID,
    svc: SuperAdminService = Depends(get_super_admin_service),
):
    try:
        users = await svc.list_organization_users(organization_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return OrganizationUsersResponse(
        organization_id=organization_id,
        items=[UserRead.model_validate(u) for u in users],
        total=len(users),
    )


# ---------------------------------------------------------------------------
# Usuarios
# ---------------------------------------------------------------------------
@router.put("/users/{user_id}/role")
async def update_user_role(
    user_id: UUID,
    payload: UserRoleIn,
    svc: SuperAdminService = Depends(get_super_admin_service),
):
    try:
        user = await svc.update_user_role(user_id, payload.role)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return {"success": True, "message": "Rol actualizado exitosamente", "user": UserRead.model_validate(user)}


@router.put("/users/{user_id}/status")
async def update_user_status(
    user_id: UUID,
    payload: UserStatusIn,
    svc: SuperAdminService = Depends(get_super_admin_service),
):
    try:
        user = await svc.update_user_status(user_id, payload.is_active)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return {"success": True, "message": "Estado actualizado exitosamente", "user": UserRead.model_validate(user)}
