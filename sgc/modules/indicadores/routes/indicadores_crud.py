# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/routes/indicadores_crud.py

CRUD de indicadores, cambios de estado (activar/desactivar/suspender),
mediciones, recálculo de tendencia y evaluación de un valor.

Autor: Equipo SGC
Fecha: 2026-09-17
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sgc.modules.auth.dependencies import CurrentUser, get_current_user, require_manager
from sgc.modules.indicadores.facades.errors import (
    CodigoIndicadorDuplicado,
    IndicadorNotFound,
    IndicadorValidationError,
)
from sgc.modules.indicadores.routes.deps import get_indicadores_service
from sgc.modules.indicadores.schemas import (
    EvaluacionRead,
    IndicadorCreateIn,
    IndicadorRead,
    IndicadorResponse,
    IndicadorUpdateIn,
    MedicionCreateIn,
    MedicionListResponse,
    MedicionRead,
    MedicionResponse,
    SuspenderIn,
    TendenciaCalculoIn,
)
from sgc.modules.indicadores.services import IndicadoresService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["indicadores:crud"])


def _to_http(e: Exception) -> HTTPException:
    if isinstance(e, IndicadorNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Indicador no encontrado")
    if isinstance(e, CodigoIndicadorDuplicado):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    logger.warning("Validación de indicador rechazada: %s", e)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


_DOMAIN_ERRORS = (IndicadorNotFound, CodigoIndicadorDuplicado, IndicadorValidationError)


def _indicador_response(message: str, indicador) -> IndicadorResponse:
    return IndicadorResponse(message=message, indicador=IndicadorRead.model_validate(indicador))


@router.get("/{indicador_id}", response_model=IndicadorRead, summary="Obtener indicador")
async def get_indicador(
    indicador_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    try:
        indicador = await svc.get(user.organization_id, indicador_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return IndicadorRead.model_validate(indicador)


@router.post(
    "",
    response_model=IndicadorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crear indicador",
)
async def create_indicador(
    payload: IndicadorCreateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    try:
        indicador = await svc.create(user.organization_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _indicador_response("Indicador creado exitosamente", indicador)


@router.put("/{indicador_id}", response_model=IndicadorResponse, summary="Actualizar indicador")
async def update_indicador(
    indicador_id: UUID,
    payload: IndicadorUpdateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    try:
        indicador = await svc.update(user.organization_id, indicador_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _indicador_response("Indicador actualizado exitosamente", indicador)


@router.delete("/{indicador_id}", summary="Eliminar indicador (baja lógica)")
async def delete_indicador(
    indicador_id: UUID,
    user: CurrentUser = Depends(require_manager),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    try:
        await svc.delete(user.organization_id, indicador_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return {"success": True, "message": "Indicador eliminado exitosamente"}


# ---------------------------------------------------------------------------
# Estado
# ---------------------------------------------------------------------------
@router.post("/{indicador_id}/activar", response_model=IndicadorResponse)
async def activar_indicador(
    indicador_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    try:
        indicador = await svc.activar(user.organization_id, indicador_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _indicador_response("Indicador activado exitosamente", indicador)


@router.post("/{indicador_id}/desactivar", response_model=IndicadorResponse)
async def desactivar_indicador(
    indicador_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    try:
        indicador = await svc.desactivar(user.organization_id, indicador_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _indicador_response("Indicador desactivado exitosamente", indicador)


@router.post("/{indicador_id}/suspender", response_model=IndicadorResponse)
async def suspender_indicador(
    indicador_id: UUID,
    payload: SuspenderIn,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    try:
        indicador = await svc.suspender(user.organization_id, indicador_id, payload.motivo)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _indicador_response("Indicador suspendido exitosamente", indicador)


# ---------------------------------------------------------------------------
# Mediciones, tendencia y evaluación
# ---------------------------------------------------------------------------
@router.post(
    "/{indicador_id}/mediciones",
    response_model=MedicionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def registrar_medicion(
    indicador_id: UUID,
    payload: MedicionCreateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    try:
        medicion = await svc.registrar_medicion(
            user.organization_id, indicador_id, payload, registrado_por=user.user_id
        )
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return MedicionResponse(
        message="Medición registrada exitosamente",
        medicion=MedicionRead.model_validate(medicion),
    )


@router.get("/{indicador_id}/mediciones", response_model=MedicionListResponse)
async def list_mediciones(
    indicador_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    try:
        items = await svc.list_mediciones(user.organization_id, indicador_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return MedicionListResponse(
        items=[MedicionRead.model_validate(m) for m in items], total=len(items)
    )


@router.post("/{indicador_id}/tendencia", response_model=IndicadorResponse)
async def actualizar_tendencia(
    indicador_id: UUID,
    payload: TendenciaCalculoIn,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    try:
        indicador = await svc.actualizar_tendencia(
            user.organization_id, indicador_id, payload.mediciones
        )
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _indicador_response("Tendencia actualizada exitosamente", indicador)


@router.get("/{indicador_id}/evaluar", response_model=EvaluacionRead)
async def evaluar_valor(
    indicador_id: UUID,
    valor: float = Query(...),
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    try:
        resultado = await svc.evaluar(user.organization_id, indicador_id, valor)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return EvaluacionRead(**resultado)
