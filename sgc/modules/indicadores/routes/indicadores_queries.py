# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/routes/indicadores_queries.py

Rutas de solo lectura de indicadores: listado con filtros, atajos por
departamento/proceso/objetivo/responsable/tipo/categoría/estado,
indicadores vigentes, pendientes de medición y estadísticas.

Se registran antes que las rutas /{indicador_id} para que los segmentos
fijos no se interpreten como ids.

Autor: Equipo SGC
Fecha: 2026-09-17
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from sgc.modules.auth.dependencies import CurrentUser, get_current_user
from sgc.modules.indicadores.enums import (
    CategoriaIndicador,
    EstadoIndicador,
    TipoIndicador,
)
from sgc.modules.indicadores.routes.deps import get_indicadores_service
from sgc.modules.indicadores.schemas import (
    IndicadorEstadisticas,
    IndicadorListResponse,
    IndicadorRead,
)
from sgc.modules.indicadores.services import IndicadoresService

router = APIRouter(tags=["indicadores:queries"])


def _list_response(items, total: Optional[int] = None) -> IndicadorListResponse:
    return IndicadorListResponse(
        items=[IndicadorRead.model_validate(i) for i in items],
        total=len(items) if total is None else total,
    )


@router.get("", response_model=IndicadorListResponse, summary="Listar indicadores (filtros opcionales)")
async def list_indicadores(
    tipo: Optional[TipoIndicador] = None,
    categoria: Optional[CategoriaIndicador] = None,
    estado: Optional[EstadoIndicador] = None,
    departamento_id: Optional[str] = None,
    proceso_id: Optional[str] = None,
    objetivo_id: Optional[str] = None,
    responsable: Optional[str] = None,
    activo: Optional[bool] = Query(None, description="Solo vigentes (true) o no vigentes (false)"),
    busqueda: Optional[str] = Query(None, description="Texto en nombre, código o descripción"),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    items, total = await svc.list(
        user.organization_id,
        tipo=tipo,
        categoria=categoria,
        estado=estado,
        departamento_id=departamento_id,
        proceso_id=proceso_id,
        objetivo_id=objetivo_id,
        responsable=responsable,
        activo=activo,
        busqueda=busqueda,
        limit=limit,
        offset=offset,
    )
    return _list_response(items, total)


@router.get("/estadisticas", response_model=IndicadorEstadisticas, summary="Estadísticas de indicadores")
async def estadisticas(
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    return IndicadorEstadisticas(**await svc.estadisticas(user.organization_id))


@router.get("/activos", response_model=IndicadorListResponse, summary="Indicadores vigentes")
async def list_activos(
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    return _list_response(await svc.list_activos(user.organization_id))


@router.get(
    "/necesitan-medicion",
    response_model=IndicadorListResponse,
    summary="Indicadores vigentes con la medición vencida",
)
async def list_necesitan_medicion(
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    return _list_response(await svc.list_necesitan_medicion(user.organization_id))


@router.get("/departamento/{departamento_id}", response_model=IndicadorListResponse)
async def list_por_departamento(
    departamento_id: str,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    items, total = await svc.list(user.organization_id, departamento_id=departamento_id)
    return _list_response(items, total)


@router.get("/proceso/{proceso_id}", response_model=IndicadorListResponse)
async def list_por_proceso(
    proceso_id: str,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    items, total = await svc.list(user.organization_id, proceso_id=proceso_id)
    return _list_response(items, total)


@router.get("/objetivo/{objetivo_id}", response_model=IndicadorListResponse)
async def list_por_objetivo(
    objetivo_id: str,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    items, total = await svc.list(user.organization_id, objetivo_id=objetivo_id)
    return _list_response(items, total)


@router.get("/responsable/{responsable}", response_model=IndicadorListResponse)
async def list_por_responsable(
    responsable: str,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    items, total = await svc.list(user.organization_id, responsable=responsable)
    return _list_response(items, total)


@router.get("/tipo/{tipo}", response_model=IndicadorListResponse)
async def list_por_tipo(
    tipo: TipoIndicador,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    items, total = await svc.list(user.organization_id, tipo=tipo)
    return _list_response(items, total)


@router.get("/categoria/{categoria}", response_model=IndicadorListResponse)
async def list_por_categoria(
    categoria: CategoriaIndicador,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    items, total = await svc.list(user.organization_id, categoria=categoria)
    return _list_response(items, total)


@router.get("/estado/{estado}", response_model=IndicadorListResponse)
async def list_por_estado(
    estado: EstadoIndicador,
    user: CurrentUser = Depends(get_current_user),
    svc: IndicadoresService = Depends(get_indicadores_service),
):
    items, total = await svc.list(user.organization_id, estado=estado)
    return _list_response(items, total)
