# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/routes/participantes_routes.py

Sub-recursos de una capacitación: temas y asistentes.

Autor: Equipo SGC
Fecha: 2026-09-19
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from sgc.modules.auth.dependencies import CurrentUser, get_current_user
from sgc.modules.capacitaciones.routes.capacitaciones_routes import DOMAIN_ERRORS, to_http
from sgc.modules.capacitaciones.routes.deps import get_capacitaciones_service
from sgc.modules.capacitaciones.schemas import (
    AsistenteCreateIn,
    AsistenteListResponse,
    AsistenteRead,
    AsistenteResponse,
    AsistenteUpdateIn,
    TemaCreateIn,
    TemaListResponse,
    TemaRead,
    TemaResponse,
    TemaUpdateIn,
)
from sgc.modules.capacitaciones.services import CapacitacionesService

router = APIRouter(tags=["capacitaciones:participantes"])


# ---------------------------------------------------------------------------
# Temas
# ---------------------------------------------------------------------------
@router.get("/{capacitacion_id}/temas", response_model=TemaListResponse)
async def list_temas(
    capacitacion_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: CapacitacionesService = Depends(get_capacitaciones_service),
):
    try:
        temas = await svc.list_temas(user.organization_id, capacitacion_id)
    except DOMAIN_ERRORS as e:
        raise to_http(e) from e
    return TemaListResponse(items=[TemaRead.model_validate(t) for t in temas], total=len(temas))


@router.post("/{capacitacion_id}/temas", response_model=TemaResponse, status_code=status.HTTP_201_CREATED)
async def add_tema(
    capacitacion_id: UUID,
    payload: TemaCreateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: CapacitacionesService = Depends(get_capacitaciones_service),
):
    try:
        tema = await svc.add_tema(user.organization_id, capacitacion_id, payload)
    except DOMAIN_ERRORS as e:
        raise to_http(e) from e
    return TemaResponse(message="Tema creado exitosamente", tema=TemaRead.model_validate(tema))


@router.put("/{capacitacion_id}/temas/{tema_id}", response_model=TemaResponse)
async def update_tema(
    capacitacion_id: UUID,
    tema_id: UUID,
    payload: TemaUpdateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: CapacitacionesService = Depends(get_capacitaciones_service),
):
    try:
        tema = await svc.update_tema(user.organization_id, capacitacion_id, tema_id, payload)
    except DOMAIN_ERRORS as e:
        raise to_http(e) from e
    return TemaResponse(message="Tema actualizado exitosamente", tema=TemaRead.model_validate(tema))


@router.delete("/{capacitacion_id}/temas/{tema_id}")
async def delete_tema(
    capacitacion_id: UUID,
    tema_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: CapacitacionesService = Depends(get_capacitaciones_service),
):
    try:
        await svc.delete_tema(user.organization_id, capacitacion_id, tema_id)
    except DOMAIN_ERRORS as e:
        raise to_http(e) from e
    return {"success": True, "message": "Tema eliminado exitosamente"}


# ---------------------------------------------------------------------------
# Asistentes
# ---------------------------------------------------------------------------
@router.get("/{capacitacion_id}/asistentes", response_model=AsistenteListResponse)
async def list_asistentes(
    capacitacion_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: CapacitacionesService = Depends(get_capacitaciones_service),
):
    try:
        asistentes = await svc.list_asistentes(user.organization_id, capacitacion_id)
    except DOMAIN_ERRORS as e:
        raise to_http(e) from e
    return AsistenteListResponse(
        items=[AsistenteRead.model_validate(a) for a in asistentes], total=len(asistentes)
    )


@router.post(
    "/{capacitacion_id}/asistentes",
    response_model=AsistenteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_asistente(
    capacitacion_id: UUID,
    payload: AsistenteCreateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: CapacitacionesService = Depends(get_capacitaciones_service),
):
    try:
        asistente = await svc.add_asistente(user.organization_id, capacitacion_id, payload)
    except DOMAIN_ERRORS as e:
        raise to_http(e) from e
    return AsistenteResponse(
        message="Asistente agregado exitosamente", asistente=AsistenteRead.model_validate(asistente)
    )


@router.put("/{capacitacion_id}/asistentes/{asistente_id}", response_model=AsistenteResponse)
async def update_asistente(
    capacitacion_id: UUID,
    asistente_id: UUID,
    payload: AsistenteUpdateIn,
    user: CurrentUser = Depends(get_current_user),
    svc: CapacitacionesService = Depends(get_capacitaciones_service),
):
    try:
        asistente = await svc.update_asistente(
            user.organization_id, capacitacion_id, asistente_id, payload
        )
    except DOMAIN_ERRORS as e:
        raise to_http(e) from e
    return AsistenteResponse(
        message="Asistente actualizado exitosamente", asistente=AsistenteRead.model_validate(asistente)
    )


@router.delete("/{capacitacion_id}/asistentes/{asistente_id}")
async def delete_asistente(
    capacitacion_id: UUID,
    asistente_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    svc: CapacitacionesService = Depends(get_capacitaciones_service),
):
    try:
        await svc.delete_asistente(user.organization_id, capacitacion_id, asistente_id)
    except DOMAIN_ERRORS as e:
        raise to_http(e) from e
    return {"success": True, "message": "Asistente eliminado exitosamente"}
