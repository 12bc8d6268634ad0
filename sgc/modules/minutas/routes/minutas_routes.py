# -*- coding: utf-8 -*-
"""
sgc/modules/minutas/routes/minutas_routes.py

Rutas de minutas.

`queries_router` agrupa las rutas de segmento fijo (/search, /stats,
/recent, /responsable/{r}) y se registra antes que `router`, que contiene
las rutas con /{minuta_id}.

Autor: Equipo SGC
Fecha: 2026-09-21
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sgc.modules.auth.dependencies import CurrentUser, get_current_user, require_manager
from sgc.modules.minutas.facades.errors import MinutaNotFound, MinutaValidationError
from sgc.modules.minutas.routes.deps import get_minutas_service
from sgc.modules.minutas.schemas import (
    MinutaCreateIn,
    MinutaEstadisticas,
    MinutaListResponse,
    MinutaRead,
    MinutaResponse,
    MinutaUpdateIn,
)
from sgc.modules.minutas.services import MinutasService

logger = logging.getLogger(__name__)

queries_router = APIRouter(tags=["minutas:queries"])
router = APIRouter(tags=["minutas"])

_DOMAIN_ERRORS = (MinutaNotFound, MinutaValidationError)


def _to_http(e: Exception) -> HTTPException:
    if isinstance(e, MinutaNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    logger.warning("Validación de minuta rechazada: %s", e)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def _listado(minutas) -> MinutaListResponse:
    return MinutaListResponse(items=[MinutaRead.model_validate(m) for m in minutas], total=len(minutas))


# ---------------------------------------------------------------------------
# Consultas
# ---------------------------------------------------------------------------
@queries_router.get("", response_model=MinutaListResponse, summary="Listar minutas")
async def list_minutas(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    user: CurrentUser = Depends(get_current_user),
    svc: MinutasService = Depends(get_minutas_service),
):
    items, total = await svc.list(user.organization_id, limit=limit, offset=offset)
    return MinutaListResponse(items=[MinutaRead.model_validate(m) for m in items], total=total)


@queries_router.get("/search", response_model=MinutaListResponse, summary="Buscar minutas")
async def search_minutas(
    q: Optional[str] = None,
    user: CurrentUser = Depends(get_current_user),
    svc: MinutasService = Depends(get_minutas_service),
):
    try:
        minutas = await svc.search(user.organization_id, q)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return _listado(minutas)


@queries_router.get("/stats", response_model=MinutaEstadisticas)
async def stats_minutas(
    user: CurrentUser = Depends(get_current_user),
    svc: MinutasService = Depends(get_minutas_service),
):
    return MinutaEstadisticas(**await svc.estadisticas(user.organization_id))


@queries_router.get("/recent", response_model=MinutaListResponse)
async def recent_minutas(
    limit: int = Query(10, ge=1, le=100),
    user: CurrentUser = Depends(get_current_user),
    svc: MinutasService = Depends(get_minutas_service),
):
    return _listado(await svc.recent(user.organization_id, limit))


@queries_router.get("/responsable/{responsable}", response_model=MinutaListResponse)
async def minutas_por_responsable(
    responsable: str,
    user: CurrentUser = Depends(get_current_user),
    svc: MinutasService = Depends(get_minutas_service),
):
    return _listado(await svc.list_por_responsable(user.organization_id, responsable))


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------
@router.get("/{minuta_id}", response_model=MinutaRead)
async def get_minuta(
    minuta_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: MinutasService = Depends(get_minutas_service),
):
    try:
        minuta = await svc.get(user.organization_id, minuta_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return MinutaRead.model_validate(minuta)


@router.post("", response_model=MinutaResponse, status_code=status.HTTP_201_CREATED)
async def create_minuta(
    payload: MinutaCreateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: MinutasService = Depends(get_minutas_service),
):
    minuta = await svc.create(user.organization_id, payload)
    return MinutaResponse(message="Minuta creada exitosamente", minuta=MinutaRead.model_validate(minuta))


@router.put("/{minuta_id}", response_model=MinutaResponse)
async def update_minuta(
    minuta_id: UUID,
    payload: MinutaUpdateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: MinutasService = Depends(get_minutas_service),
):
    try:
        minuta = await svc.update(user.organization_id, minuta_id, payload)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return MinutaResponse(message="Minuta actualizada exitosamente", minuta=MinutaRead.model_validate(minuta))


@router.delete("/{minuta_id}")
async def delete_minuta(
    minuta_id: UUID,
    user: CurrentUser = Depends(require_manager),
    svc: MinutasService = Depends(get_minutas_service),
):
    try:
        await svc.delete(user.organization_id, minuta_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return {"success": True, "message": "Minuta eliminada exitosamente"}


@router.post("/{minuta_id}/duplicate", response_model=MinutaResponse, status_code=status.HTTP_201_CREATED)
async def duplicate_minuta(
    minuta_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: MinutasService = Depends(get_minutas_service),
):
    try:
        copia = await svc.duplicate(user.organization_id, minuta_id)
    except _DOMAIN_ERRORS as e:
        raise _to_http(e) from e
    return MinutaResponse(message="Minuta duplicada exitosamente", minuta=MinutaRead.model_validate(copia))
