# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/routes/capacitaciones_routes.py

CRUD de capacitaciones.

Autor: Equipo SGC
Fecha: 2026-09-19
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sgc.modules.auth.dependencies import CurrentUser, get_current_user, require_manager
from sgc.modules.capacitaciones.enums import EstadoCapacitacion, ModalidadCapacitacion
from sgc.modules.capacitaciones.facades.errors import (
    AsistenteDuplicado,
    AsistenteNotFound,
    CapacitacionNotFound,
    CapacitacionValidationError,
    CupoCompleto,
    TemaNotFound,
)
from sgc.modules.capacitaciones.routes.deps import get_capacitaciones_service
from sgc.modules.capacitaciones.schemas import (
    CapacitacionCreateIn,
    CapacitacionListResponse,
    CapacitacionRead,
    CapacitacionResponse,
    CapacitacionUpdateIn,
)
from sgc.modules.capacitaciones.services import CapacitacionesService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["capacitaciones"])

DOMAIN_ERRORS = (
    CapacitacionNotFound,
    TemaNotFound,
    AsistenteNotFound,
    CapacitacionValidationError,
    AsistenteDuplicado,
    CupoCompleto,
)


def to_http(e: Exception) -> HTTPException:
    if isinstance(e, (CapacitacionNotFound, TemaNotFound, AsistenteNotFound)):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, (AsistenteDuplicado, CupoCompleto)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    logger.warning("Validación de capacitación rechazada: %s", e)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=CapacitacionListResponse, summary="Listar capacitaciones")
async def list_capacitaciones(
    estado: Optional[EstadoCapacitacion] = None,
    modalidad: Optional[ModalidadCapacitacion] = None,
    busqueda: Optional[str] = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    user: CurrentUser = Depends(get_current_user),
    svc: CapacitacionesService = Depends(get_capacitaciones_service),
):
    items, total = await svc.list(
        user.organization_id,
        estado=estado,
        modalidad=modalidad,
        busqueda=busqueda,
        limit=limit,
        offset=offset,
    )
    return CapacitacionListResponse(
        items=[CapacitacionRead.model_validate(c) for c in items], total=total
    )


@router.get("/{capacitacion_id}", response_model=CapacitacionRead)
async def get_capacitacion(
    capacitacion_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: CapacitacionesService = Depends(get_capacitaciones_service),
):
    try:
        capacitacion = await svc.get(user.organization_id, capacitacion_id)
    except DOMAIN_ERRORS as e:
        raise to_http(e) from e
    return CapacitacionRead.model_validate(capacitacion)


@router.post("", response_model=CapacitacionResponse, status_code=status.HTTP_201_CREATED)
async def create_capacitacion(
    payload: CapacitacionCreateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: CapacitacionesService = Depends(get_capacitaciones_service),
):
    try:
        capacitacion = await svc.create(user.organization_id, payload)
    except DOMAIN_ERRORS as e:
        raise to_http(e) from e
    return CapacitacionResponse(
        message="Capacitación creada exitosamente",
        capacitacion=CapacitacionRead.model_validate(capacitacion),
    )


@router.put("/{capacitacion_id}", response_model=CapacitacionResponse)
async def update_capacitacion(
    capacitacion_id: UUID,
    payload: CapacitacionUpdateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: CapacitacionesService = Depends(get_capacitaciones_service),
):
    try:
        capacitacion = await svc.update(user.organization_id, capacitacion_id, payload)
    except DOMAIN_ERRORS as e:
        raise to_http(e) from e
    return CapacitacionResponse(
        message="Capacitación actualizada exitosamente",
        capacitacion=CapacitacionRead.model_validate(capacitacion),
    )


@router.delete("/{capacitacion_id}")
async def delete_capacitacion(
    capacitacion_id: UUID,
    user: CurrentUser = Depends(require_manager),
    svc: CapacitacionesService = Depends(get_capacitaciones_service),
):
    try:
        await svc.delete(user.organization_id, capacitacion_id)
    except DOMAIN_ERRORS as e:
        raise to_http(e) from e
    return {"success": True, "message": "Capacitación eliminada exitosamente"}
