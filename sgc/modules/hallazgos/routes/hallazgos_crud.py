# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/routes/hallazgos_crud.py

CRUD de hallazgos y cambio de estado.

Autor: Equipo SGC
Fecha: 2026-09-20
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from sgc.modules.auth.dependencies import CurrentUser, get_current_user, require_manager
from sgc.modules.hallazgos.facades.errors import (
    HallazgoNotFound,
    HallazgoValidationError,
    NumeroHallazgoDuplicado,
    TransicionInvalida,
)
from sgc.modules.hallazgos.routes.deps import get_hallazgos_service
from sgc.modules.hallazgos.schemas import (
    CambioEstadoIn,
    HallazgoCreateIn,
    HallazgoRead,
    HallazgoResponse,
    HallazgoUpdateIn,
)
from sgc.modules.hallazgos.services import HallazgosService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["hallazgos"])

_DOMAIN_ERRORS = (HallazgoNotFound, TransicionInvalida, HallazgoValidationError, NumeroHallazgoDuplicado)


def _to_http(e: Exception) -> HTTPException:
    if isinstance(e, HallazgoNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, (TransicionInvalida, NumeroHallazgoDuplicado)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    logger.warning("Validación de hallazgo rechazada: %s", e)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{hallazgo_id}", response_model=HallazgoRead)
async def get_hallazgo(
    hallazgo_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: HallazgosService = Depends(get_hallazgos_service),
):
    try:
        hallazgo = await svc.get(user.organization_id, hallazgo_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return HallazgoRead.model_validate(hallazgo)


@router.post("", response_model=HallazgoResponse, status_code=status.HTTP_201_CREATED)
async def create_hallazgo(
    payload: HallazgoCreateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: HallazgosService = Depends(get_hallazgos_service),
):
    try:
        hallazgo = await svc.create(user.organization_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return HallazgoResponse(message="Hallazgo creado exitosamente", hallazgo=HallazgoRead.model_validate(hallazgo))


@router.put("/{hallazgo_id}", response_model=HallazgoResponse)
async def update_hallazgo(
    hallazgo_id: UUID,
    payload: HallazgoUpdateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: HallazgosService = Depends(get_hallazgos_service),
):
    try:
        hallazgo = await svc.update(user.organization_id, hallazgo_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return HallazgoResponse(
        message="Hallazgo actualizado exitosamente", hallazgo=HallazgoRead.model_validate(hallazgo)
    )


@router.put("/{hallazgo_id}/estado", response_model=HallazgoResponse)
async def cambiar_estado_hallazgo(
    hallazgo_id: UUID,
    payload: CambioEstadoIn,
    user: CurrentUser = Depends(get_current_user),
    svc: HallazgosService = Depends(get_hallazgos_service),
):
    try:
        hallazgo = await svc.cambiar_estado(user.organization_id, hallazgo_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return HallazgoResponse(
        message="Estado del hallazgo actualizado exitosamente",
        hallazgo=HallazgoRead.model_validate(hallazgo),
    )


@router.delete("/{hallazgo_id}")
async def delete_hallazgo(
    hallazgo_id: UUID,
    user: CurrentUser = Depends(require_manager),
    svc: HallazgosService = Depends(get_hallazgos_service),
):
    try:
        await svc.delete(user.organization_id, hallazgo_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return {"success": True, "message": "Hallazgo eliminado exitosamente"}
