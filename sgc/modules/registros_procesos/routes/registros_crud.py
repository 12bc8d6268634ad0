# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/routes/registros_crud.py

CRUD de registros de procesos y operaciones de ciclo de vida
(cerrar, seguimiento, actualizar acción, progreso).

Autor: Equipo SGC
Fecha: 2026-09-18
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from sgc.modules.auth.dependencies import CurrentUser, get_current_user, require_manager
from sgc.modules.registros_procesos.facades.errors import (
    CodigoRegistroDuplicado,
    RegistroNotFound,
    RegistroValidationError,
    RegistroYaCerrado,
)
from sgc.modules.registros_procesos.routes.deps import get_registros_service
from sgc.modules.registros_procesos.schemas import (
    AccionUpdateIn,
    CerrarRegistroIn,
    ProgresoRead,
    RegistroCreateIn,
    RegistroRead,
    RegistroResponse,
    RegistroUpdateIn,
    SeguimientoIn,
)
from sgc.modules.registros_procesos.services import RegistrosProcesosService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["registros-procesos:crud"])

_DOMAIN_ERRORS = (RegistroNotFound, CodigoRegistroDuplicado, RegistroValidationError, RegistroYaCerrado)


def _to_http(e: Exception) -> HTTPException:
    if isinstance(e, RegistroNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Registro no encontrado")
    if isinstance(e, (CodigoRegistroDuplicado, RegistroYaCerrado)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    logger.warning("Validación de registro rechazada: %s", e)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def _registro_response(message: str, registro) -> RegistroResponse:
    return RegistroResponse(message=message, registro=RegistroRead.model_validate(registro))


@router.get("/{registro_id}", response_model=RegistroRead)
async def get_registro(
    registro_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    try:
        registro = await svc.get(user.organization_id, registro_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return RegistroRead.model_validate(registro)


@router.post("", response_model=RegistroResponse, status_code=status.HTTP_201_CREATED)
async def create_registro(
    payload: RegistroCreateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    try:
        registro = await svc.create(user.organization_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _registro_response("Registro creado exitosamente", registro)


@router.put("/{registro_id}", response_model=RegistroResponse)
async def update_registro(
    registro_id: UUID,
    payload: RegistroUpdateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    try:
        registro = await svc.update(user.organization_id, registro_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _registro_response("Registro actualizado exitosamente", registro)


@router.delete("/{registro_id}")
async def delete_registro(
    registro_id: UUID,
    user: CurrentUser = Depends(require_manager),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    try:
        await svc.delete(user.organization_id, registro_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return {"success": True, "message": "Registro eliminado exitosamente"}


@router.post("/{registro_id}/cerrar", response_model=RegistroResponse, summary="Cerrar registro")
async def cerrar_registro(
    registro_id: UUID,
    payload: CerrarRegistroIn,
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    try:
        registro = await svc.cerrar(user.organization_id, registro_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _registro_response("Registro cerrado exitosamente", registro)


@router.post("/{registro_id}/seguimiento", response_model=RegistroResponse)
async def agregar_seguimiento(
    registro_id: UUID,
    payload: SeguimientoIn,
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    try:
        registro = await svc.agregar_seguimiento(user.organization_id, registro_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _registro_response("Seguimiento agregado exitosamente", registro)


@router.put("/{registro_id}/acciones/{index}", response_model=RegistroResponse)
async def actualizar_accion(
    registro_id: UUID,
    index: int,
    payload: AccionUpdateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    try:
        registro = await svc.actualizar_accion(user.organization_id, registro_id, index, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _registro_response("Acción actualizada exitosamente", registro)


@router.get("/{registro_id}/progreso", response_model=ProgresoRead)
async def progreso(
    registro_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    try:
        resumen = await svc.progreso(user.organization_id, registro_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return ProgresoRead(**resumen)
