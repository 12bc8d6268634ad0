# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/routes/registros_queries.py

Rutas de solo lectura de registros de procesos (listados, atajos,
vencidos, necesitan atención, con alertas, estadísticas).

Autor: Equipo SGC
Fecha: 2026-09-18
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from sgc.shared.enums import Prioridad
from sgc.shared.utils.dates import as_utc
from sgc.modules.auth.dependencies import CurrentUser, get_current_user
from sgc.modules.registros_procesos.enums import (
    CategoriaRegistro,
    EstadoRegistro,
    TipoRegistro,
)
from sgc.modules.registros_procesos.routes.deps import get_registros_service
from sgc.modules.registros_procesos.schemas import (
    RegistroEstadisticas,
    RegistroListResponse,
    RegistroRead,
)
from sgc.modules.registros_procesos.services import RegistrosProcesosService

router = APIRouter(tags=["registros-procesos:queries"])


def _list_response(items, total: Optional[int] = None) -> RegistroListResponse:
    return RegistroListResponse(
        items=[RegistroRead.model_validate(r) for r in items],
        total=len(items) if total is None else total,
    )


@router.get("", response_model=RegistroListResponse, summary="Listar registros de procesos")
async def list_registros(
    tipo: Optional[TipoRegistro] = None,
    estado: Optional[EstadoRegistro] = None,
    prioridad: Optional[Prioridad] = None,
    categoria: Optional[CategoriaRegistro] = None,
    proceso_id: Optional[str] = None,
    departamento_id: Optional[str] = None,
    responsable: Optional[str] = None,
    fecha_inicio: Optional[datetime] = None,
    fecha_fin: Optional[datetime] = None,
    vencido: Optional[bool] = None,
    busqueda: Optional[str] = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    items, total = await svc.list(
        user.organization_id,
        tipo=tipo,
        estado=estado,
        prioridad=prioridad,
        categoria=categoria,
        proceso_id=proceso_id,
        departamento_id=departamento_id,
        responsable=responsable,
        fecha_inicio=as_utc(fecha_inicio),
        fecha_fin=as_utc(fecha_fin),
        vencido=vencido,
        busqueda=busqueda,
        limit=limit,
        offset=offset,
    )
    return _list_response(items, total)


@router.get("/estadisticas", response_model=RegistroEstadisticas)
async def estadisticas(
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    return RegistroEstadisticas(**await svc.estadisticas(user.organization_id))


@router.get("/vencidos", response_model=RegistroListResponse, summary="Registros vencidos")
async def list_vencidos(
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    return _list_response(await svc.list_vencidos(user.organization_id))


@router.get("/necesitan-atencion", response_model=RegistroListResponse)
async def list_necesitan_atencion(
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    return _list_response(await svc.list_necesitan_atencion(user.organization_id))


@router.get("/con-alertas", response_model=RegistroListResponse)
async def list_con_alertas(
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    return _list_response(await svc.list_con_alertas(user.organization_id))


@router.get("/proceso/{proceso_id}", response_model=RegistroListResponse)
async def list_por_proceso(
    proceso_id: str,
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    items, total = await svc.list(user.organization_id, proceso_id=proceso_id)
    return _list_response(items, total)


@router.get("/departamento/{departamento_id}", response_model=RegistroListResponse)
async def list_por_departamento(
    departamento_id: str,
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    items, total = await svc.list(user.organization_id, departamento_id=departamento_id)
    return _list_response(items, total)


@router.get("/responsable/{responsable}", response_model=RegistroListResponse)
async def list_por_responsable(
    responsable: str,
    user: CurrentUser = Depends(get_current_user),
    svc: RegistrosProcesosService = Depends(get_registros_service),
):
    items, total = await svc.list(user.organization_id, responsable=responsable)
    return _list_response(items, total)
