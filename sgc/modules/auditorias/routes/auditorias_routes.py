# -*- coding: utf-8 -*-
"""
sgc/modules/auditorias/routes/auditorias_routes.py

Rutas de auditorías: CRUD, aspectos y relaciones.

Autor: Equipo SGC
Fecha: 2026-09-19
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sgc.modules.auth.dependencies import CurrentUser, get_current_user, require_manager
from sgc.modules.auditorias.enums import EstadoAuditoria
from sgc.modules.auditorias.facades.errors import (
    AspectoNotFound,
    AuditoriaNotFound,
    CodigoAuditoriaDuplicado,
    RelacionDuplicada,
    RelacionNotFound,
)
from sgc.modules.auditorias.routes.deps import get_auditorias_service
from sgc.modules.auditorias.schemas import (
    AspectoIn,
    AspectoListResponse,
    AspectoRead,
    AspectoResponse,
    AuditoriaCreateIn,
    AuditoriaDetalleRead,
    AuditoriaListResponse,
    AuditoriaRead,
    AuditoriaResponse,
    AuditoriaUpdateIn,
    RelacionIn,
    RelacionListResponse,
    RelacionRead,
    RelacionResponse,
)
from sgc.modules.auditorias.services import AuditoriasService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auditorias"])

_DOMAIN_ERRORS = (
    AuditoriaNotFound,
    AspectoNotFound,
    RelacionNotFound,
    CodigoAuditoriaDuplicado,
    RelacionDuplicada,
)


def _to_http(e: Exception) -> HTTPException:
    if isinstance(e, (AuditoriaNotFound, AspectoNotFound, RelacionNotFound)):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


async def _detalle(svc: AuditoriasService, organizacion_id: UUID, auditoria_id: UUID) -> AuditoriaDetalleRead:
    auditoria, aspectos, relaciones = await svc.get_detalle(organizacion_id, auditoria_id)
    return AuditoriaDetalleRead(
        **AuditoriaRead.model_validate(auditoria).model_dump(),
        aspectos=[AspectoRead.model_validate(a) for a in aspectos],
        relaciones=[RelacionRead.model_validate(r) for r in relaciones],
    )


# ---------------------------------------------------------------------------
# Auditorías
# ---------------------------------------------------------------------------
@router.get("", response_model=AuditoriaListResponse, summary="Listar auditorías")
async def list_auditorias(
    estado: Optional[EstadoAuditoria] = None,
    area: Optional[str] = None,
    busqueda: Optional[str] = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    user: CurrentUser = Depends(get_current_user),
    svc: AuditoriasService = Depends(get_auditorias_service),
):
    items, total = await svc.list(
        user.organization_id, estado=estado, area=area, busqueda=busqueda, limit=limit, offset=offset
    )
    return AuditoriaListResponse(items=[AuditoriaRead.model_validate(a) for a in items], total=total)


@router.get("/{auditoria_id}", response_model=AuditoriaDetalleRead, summary="Auditoría con aspectos y relaciones")
async def get_auditoria(
    auditoria_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: AuditoriasService = Depends(get_auditorias_service),
):
    try:
        return await _detalle(svc, user.organization_id, auditoria_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e


@router.post("", response_model=AuditoriaResponse, status_code=status.HTTP_201_CREATED)
async def create_auditoria(
    payload: AuditoriaCreateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: AuditoriasService = Depends(get_auditorias_service),
):
    try:
        auditoria = await svc.create(user.organization_id, payload)
        detalle = await _detalle(svc, user.organization_id, auditoria.id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return AuditoriaResponse(message="Auditoría creada exitosamente", auditoria=detalle)


@router.put("/{auditoria_id}", response_model=AuditoriaResponse)
async def update_auditoria(
    auditoria_id: UUID,
    payload: AuditoriaUpdateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: AuditoriasService = Depends(get_auditorias_service),
):
    try:
        await svc.update(user.organization_id, auditoria_id, payload)
        detalle = await _detalle(svc, user.organization_id, auditoria_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return AuditoriaResponse(message="Auditoría actualizada exitosamente", auditoria=detalle)


@router.delete("/{auditoria_id}")
async def delete_auditoria(
    auditoria_id: UUID,
    user: CurrentUser = Depends(require_manager),
    svc: AuditoriasService = Depends(get_auditorias_service),
):
    try:
        await svc.delete(user.organization_id, auditoria_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return {"success": True, "message": "Auditoría eliminada exitosamente"}


# ---------------------------------------------------------------------------
# Aspectos
# ---------------------------------------------------------------------------
@router.get("/{auditoria_id}/aspectos", response_model=AspectoListResponse)
async def list_aspectos(
    auditoria_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: AuditoriasService = Depends(get_auditorias_service),
):
    try:
        aspectos = await svc.list_aspectos(user.organization_id, auditoria_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return AspectoListResponse(items=[AspectoRead.model_validate(a) for a in aspectos], total=len(aspectos))


@router.post("/{auditoria_id}/aspectos", response_model=AspectoResponse, status_code=status.HTTP_201_CREATED)
async def add_aspecto(
    auditoria_id: UUID,
    payload: AspectoIn,
    user: CurrentUser = Depends(get_current_user),
    svc: AuditoriasService = Depends(get_auditorias_service),
):
    try:
        aspecto = await svc.add_aspecto(user.organization_id, auditoria_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return AspectoResponse(message="Aspecto agregado exitosamente", aspecto=AspectoRead.model_validate(aspecto))


@router.put("/{auditoria_id}/aspectos/{aspecto_id}", response_model=AspectoResponse)
async def update_aspecto(
    auditoria_id: UUID,
    aspecto_id: UUID,
    payload: AspectoIn,
    user: CurrentUser = Depends(get_current_user),
    svc: AuditoriasService = Depends(get_auditorias_service),
):
    try:
        aspecto = await svc.update_aspecto(user.organization_id, auditoria_id, aspecto_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return AspectoResponse(message="Aspecto actualizado exitosamente", aspecto=AspectoRead.model_validate(aspecto))


@router.delete("/{auditoria_id}/aspectos/{aspecto_id}")
async def delete_aspecto(
    auditoria_id: UUID,
    aspecto_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: AuditoriasService = Depends(get_auditorias_service),
):
    try:
        await svc.delete_aspecto(user.organization_id, auditoria_id, aspecto_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return {"success": True, "message": "Aspecto eliminado exitosamente"}


# ---------------------------------------------------------------------------
# Relaciones
# ---------------------------------------------------------------------------
@router.get("/{auditoria_id}/relaciones", response_model=RelacionListResponse)
async def list_relaciones(
    auditoria_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: AuditoriasService = Depends(get_auditorias_service),
):
    try:
        relaciones = await svc.list_relaciones(user.organization_id, auditoria_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return RelacionListResponse(
        items=[RelacionRead.model_validate(r) for r in relaciones], total=len(relaciones)
    )


@router.post("/{auditoria_id}/relaciones", response_model=RelacionResponse, status_code=status.HTTP_201_CREATED)
async def add_relacion(
    auditoria_id: UUID,
    payload: RelacionIn,
    user: CurrentUser = Depends(get_current_user),
    svc: AuditoriasService = Depends(get_auditorias_service),
):
    try:
        relacion = await svc.add_relacion(user.organization_id, auditoria_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return RelacionResponse(message="Relación agregada exitosamente", relacion=RelacionRead.model_validate(relacion))


@router.delete("/{auditoria_id}/relaciones/{relacion_id}")
async def delete_relacion(
    auditoria_id: UUID,
    relacion_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: AuditoriasService = Depends(get_auditorias_service),
):
    try:
        await svc.delete_relacion(user.organization_id, auditoria_id, relacion_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return {"success": True, "message": "Relación eliminada exitosamente"}
