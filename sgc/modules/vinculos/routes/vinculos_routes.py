# -*- coding: utf-8 -*-
"""
sgc/modules/vinculos/routes/vinculos_routes.py

Fábrica de rutas de vínculos para una entidad:

    GET/POST   /{entidad_id}/participantes    DELETE /{entidad_id}/participantes/{id}
    GET/POST   /{entidad_id}/documentos       DELETE /{entidad_id}/documentos/{id}
    GET/POST   /{entidad_id}/normas           DELETE /{entidad_id}/normas/{id}

El módulo dueño incluye el router resultante bajo su propio prefijo.

Autor: Equipo SGC
Fecha: 2026-10-19
"""

from typing import Any, Type
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import get_db
from sgc.modules.auth.dependencies import CurrentUser, get_current_user
from sgc.modules.vinculos.enums import EntidadTipo, TipoVinculo
from sgc.modules.vinculos.facades.errors import VinculoNotFound
from sgc.modules.vinculos.schemas import (
    DocumentoCreateIn,
    DocumentoListResponse,
    DocumentoRead,
    DocumentoResponse,
    NormaCreateIn,
    NormaListResponse,
    NormaRead,
    NormaResponse,
    ParticipanteCreateIn,
    ParticipanteListResponse,
    ParticipanteRead,
    ParticipanteResponse,
)
from sgc.modules.vinculos.services import VinculosService


def build_vinculos_router(
    entidad_tipo: EntidadTipo,
    entidad_model: Any,
    entidad_not_found: Type[Exception],
) -> APIRouter:
    router = APIRouter(tags=[f"{entidad_tipo.value}s:vinculos"])
    domain_errors = (VinculoNotFound, entidad_not_found)

    async def get_service(db: AsyncSession = Depends(get_db)) -> VinculosService:
        return VinculosService(db, entidad_tipo, entidad_model, entidad_not_found)

    def to_http(e: Exception) -> HTTPException:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    async def eliminar(svc, user, entidad_id, tipo, vinculo_id) -> None:
        try:
            await svc.delete(user.organization_id, entidad_id, tipo, vinculo_id)
        except domain_errors as e:
            raise to_http(e) from e

    async def listar(svc, user, entidad_id, tipo):
        try:
            return await svc.list(user.organization_id, entidad_id, tipo)
        except domain_errors as e:
            raise to_http(e) from e

    async def agregar(svc, user, entidad_id, tipo, payload):
        try:
            return await svc.add(user.organization_id, entidad_id, tipo, payload)
        except domain_errors as e:
            raise to_http(e) from e

    # -----------------------------------------------------------------------
    # Participantes
    # -----------------------------------------------------------------------
    @router.get("/{entidad_id}/participantes", response_model=ParticipanteListResponse)
    async def list_participantes(
        entidad_id: UUID,
        user: CurrentUser = Depends(get_current_user),
        svc: VinculosService = Depends(get_service),
    ):
        items = await listar(svc, user, entidad_id, TipoVinculo.PARTICIPANTES)
        return ParticipanteListResponse(items=[ParticipanteRead.model_validate(p) for p in items], total=len(items))

    @router.post(
        "/{entidad_id}/participantes",
        response_model=ParticipanteResponse,
        status_code=status.HTTP_201_CREATED,
    )
    async def add_participante(
        entidad_id: UUID,
        payload: ParticipanteCreateIn,
        user: CurrentUser = Depends(get_current_user),
        svc: VinculosService = Depends(get_service),
    ):
        participante = await agregar(svc, user, entidad_id, TipoVinculo.PARTICIPANTES, payload)
        return ParticipanteResponse(
            message="Participante agregado exitosamente",
            participante=ParticipanteRead.model_validate(participante),
        )

    @router.delete("/{entidad_id}/participantes/{vinculo_id}")
    async def delete_participante(
        entidad_id: UUID,
        vinculo_id: UUID,
        user: CurrentUser = Depends(get_current_user),
        svc: VinculosService = Depends(get_service),
    ):
        await eliminar(svc, user, entidad_id, TipoVinculo.PARTICIPANTES, vinculo_id)
        return {"success": True, "message": "Participante eliminado exitosamente"}

    # -----------------------------------------------------------------------
    # Documentos
    # -----------------------------------------------------------------------
    @router.get("/{entidad_id}/documentos", response_model=DocumentoListResponse)
    async def list_documentos(
        entidad_id: UUID,
        user: CurrentUser = Depends(get_current_user),
        svc: VinculosService = Depends(get_service),
    ):
        items = await listar(svc, user, entidad_id, TipoVinculo.DOCUMENTOS)
        return DocumentoListResponse(items=[DocumentoRead.model_validate(d) for d in items], total=len(items))

    @router.post(
        "/{entidad_id}/documentos",
        response_model=DocumentoResponse,
        status_code=status.HTTP_201_CREATED,
    )
    async def add_documento(
        entidad_id: UUID,
        payload: DocumentoCreateIn,
        user: CurrentUser = Depends(get_current_user),
        svc: VinculosService = Depends(get_service),
    ):
        documento = await agregar(svc, user, entidad_id, TipoVinculo.DOCUMENTOS, payload)
        return DocumentoResponse(
            message="Documento relacionado exitosamente", documento=DocumentoRead.model_validate(documento)
        )

    @router.delete("/{entidad_id}/documentos/{vinculo_id}")
    async def delete_documento(
        entidad_id: UUID,
        vinculo_id: UUID,
        user: CurrentUser = Depends(get_current_user),
        svc: VinculosService = Depends(get_service),
    ):
        await eliminar(svc, user, entidad_id, TipoVinculo.DOCUMENTOS, vinculo_id)
        return {"success": True, "message": "Documento desvinculado exitosamente"}

    # -----------------------------------------------------------------------
    # Normas
    # -----------------------------------------------------------------------
    @router.get("/{entidad_id}/normas", response_model=NormaListResponse)
    async def list_normas(
        entidad_id: UUID,
        user: CurrentUser = Depends(get_current_user),
        svc: VinculosService = Depends(get_service),
    ):
        items = await listar(svc, user, entidad_id, TipoVinculo.NORMAS)
        return NormaListResponse(items=[NormaRead.model_validate(n) for n in items], total=len(items))

    @router.post(
        "/{entidad_id}/normas",
        response_model=NormaResponse,
        status_code=status.HTTP_201_CREATED,
    )
    async def add_norma(
        entidad_id: UUID,
        payload: NormaCreateIn,
        user: CurrentUser = Depends(get_current_user),
        svc: VinculosService = Depends(get_service),
    ):
        norma = await agregar(svc, user, entidad_id, TipoVinculo.NORMAS, payload)
        return NormaResponse(message="Norma relacionada exitosamente", norma=NormaRead.model_validate(norma))

    @router.delete("/{entidad_id}/normas/{vinculo_id}")
    async def delete_norma(
        entidad_id: UUID,
        vinculo_id: UUID,
        user: CurrentUser = Depends(get_current_user),
        svc: VinculosService = Depends(get_service),
    ):
        await eliminar(svc, user, entidad_id, TipoVinculo.NORMAS, vinculo_id)
        return {"success": True, "message": "Norma desvinculada exitosamente"}

    return router


__all__ = ["build_vinculos_router"]
