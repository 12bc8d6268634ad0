# -*- coding: utf-8 -*-
"""
sgc/modules/acciones/routes/acciones_routes.py

Autor: Equipo SGC
Fecha: 2026-09-20
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from sgc.modules.auth.dependencies import CurrentUser, get_current_user, require_manager
from sgc.modules.acciones.facades.errors import (
    AccionNotFound,
    HallazgoInexistente,
    NumeroAccionDuplicado,
    SinCamposActualizables,
)
from sgc.modules.acciones.routes.deps import get_acciones_service
from sgc.modules.acciones.schemas import (
    AccionCreateIn,
    AccionListResponse,
    AccionRead,
    AccionResponse,
    AccionUpdateIn,
)
from sgc.modules.acciones.services import AccionesService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["acciones"])
hallazgo_router = APIRouter(tags=["acciones"])

_DOMAIN_ERRORS = (AccionNotFound, HallazgoInexistente, SinCamposActualizables, NumeroAccionDuplicado)


def _to_http(e: Exception) -> HTTPException:
    if isinstance(e, (AccionNotFound, HallazgoInexistente)):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, NumeroAccionDuplicado):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    logger.warning("Actualización de acción rechazada: %s", e)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def _listado(acciones) -> AccionListResponse:
    return AccionListResponse(items=[AccionRead.model_validate(a) for a in acciones], total=len(acciones))


@router.get("", response_model=AccionListResponse, summary="Listar acciones")
async def list_acciones(
    hallazgo_id: Optional[UUID] = None,
    user: CurrentUser = Depends(get_current_user),
    svc: AccionesService = Depends(get_acciones_service),
):
    return _listado(await svc.list(user.organization_id, hallazgo_id=hallazgo_id))


@router.get("/{accion_id}", response_model=AccionRead)
async def get_accion(
    accion_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: AccionesService = Depends(get_acciones_service),
):
    try:
        accion = await svc.get(user.organization_id, accion_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return AccionRead.model_validate(accion)


@router.post("", response_model=AccionResponse, status_code=status.HTTP_201_CREATED)
async def create_accion(
    payload: AccionCreateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: AccionesService = Depends(get_acciones_service),
):
    try:
        accion = await svc.create(user.organization_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return AccionResponse(message="Acción creada exitosamente", accion=AccionRead.model_validate(accion))


@router.put("/{accion_id}", response_model=AccionResponse)
async def update_accion(
    accion_id: UUID,
    payload: AccionUpdateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: AccionesService = Depends(get_acciones_service),
):
    try:
        accion = await svc.update(user.organization_id, accion_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return AccionResponse(message="Acción actualizada exitosamente", accion=AccionRead.model_validate(accion))


@router.delete("/{accion_id}")
async def delete_accion(
    accion_id: UUID,
    user: CurrentUser = Depends(require_manager),
    svc: AccionesService = Depends(get_acciones_service),
):
    try:
        await svc.delete(user.organization_id, accion_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return {"success": True, "message": "Acción eliminada con éxito."}


@hallazgo_router.get("/{hallazgo_id}/acciones", response_model=AccionListResponse)
async def list_acciones_hallazgo(
    hallazgo_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: AccionesService = Depends(get_acciones_service),
):
    try:
        acciones = await svc.list_por_hallazgo(user.organization_id, hallazgo_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _listado(acciones)
