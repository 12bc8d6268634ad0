# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/routes/hallazgos_queries.py

Consultas de hallazgos: listado con filtros, búsqueda paginada, recientes
y estadísticas.

Autor: Equipo SGC
Fecha: 2026-09-20
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sgc.modules.auth.dependencies import CurrentUser, get_current_user
from sgc.modules.hallazgos.enums import (
    CategoriaHallazgo,
    EstadoHallazgo,
    OrigenHallazgo,
    Prioridad,
)
from sgc.modules.hallazgos.facades.errors import HallazgoValidationError
from sgc.modules.hallazgos.routes.deps import get_hallazgos_service
from sgc.modules.hallazgos.schemas import (
    HallazgoEstadisticas,
    HallazgoListResponse,
    HallazgoRead,
    HallazgoSearchResponse,
    Paginacion,
)
from sgc.modules.hallazgos.services import HallazgosService

router = APIRouter(tags=["hallazgos:queries"])


@router.get("", response_model=HallazgoListResponse, summary="Listar hallazgos")
async def list_hallazgos(
    estado: Optional[EstadoHallazgo] = None,
    prioridad: Optional[Prioridad] = None,
    categoria: Optional[CategoriaHallazgo] = None,
    origen: Optional[OrigenHallazgo] = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    user: CurrentUser = Depends(get_current_user),
    svc: HallazgosService = Depends(get_hallazgos_service),
):
    items, total = await svc.list(
        user.organization_id,
        estado=estado,
        prioridad=prioridad,
        categoria=categoria,
        origen=origen,
        limit=limit,
        offset=offset,
    )
    return HallazgoListResponse(items=[HallazgoRead.model_validate(h) for h in items], total=total)


@router.get("/search", response_model=HallazgoSearchResponse, summary="Buscar hallazgos")
async def search_hallazgos(
    q: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=200),
    user: CurrentUser = Depends(get_current_user),
    svc: HallazgosService = Depends(get_hallazgos_service),
):
    try:
        items, pagination = await svc.search(user.organization_id, q, page=page, limit=limit)
    except HallazgoValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return HallazgoSearchResponse(
        items=[HallazgoRead.model_validate(h) for h in items],
        pagination=Paginacion(**pagination),
    )


@router.get("/recent", response_model=HallazgoListResponse, summary="Hallazgos recientes")
async def recent_hallazgos(
    limit: int = Query(10, ge=1, le=100),
    user: CurrentUser = Depends(get_current_user),
    svc: HallazgosService = Depends(get_hallazgos_service),
):
    items = await svc.recent(user.organization_id, limit)
    return HallazgoListResponse(items=[HallazgoRead.model_validate(h) for h in items], total=len(items))


@router.get("/stats", response_model=HallazgoEstadisticas, summary="Estadísticas de hallazgos")
async def stats_hallazgos(
    user: CurrentUser = Depends(get_current_user),
    svc: HallazgosService = Depends(get_hallazgos_service),
):
    return HallazgoEstadisticas(**await svc.estadisticas(user.organization_id))
