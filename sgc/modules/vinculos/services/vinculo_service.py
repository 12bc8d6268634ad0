# -*- coding: utf-8 -*-
"""
sgc/modules/vinculos/services/vinculo_service.py

Servicio de vínculos (participantes, documentos, normas) de una entidad.

Una instancia queda atada a un tipo de entidad y a su modelo: antes de
listar o agregar se comprueba que la entidad exista y esté activa en la
organización, y si no se lanza el NotFound propio de esa entidad. Las
bajas son lógicas (is_active=False).

Autor: Equipo SGC
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Sequence, Type
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import TenantRepository, commit_or_raise
from sgc.modules.vinculos.enums import EntidadTipo, TipoVinculo
from sgc.modules.vinculos.facades.errors import (
    DocumentoNotFound,
    NormaNotFound,
    ParticipanteNotFound,
    VinculoNotFound,
)
from sgc.modules.vinculos.models import DocumentoRelacionado, NormaRelacionada, Participante

logger = logging.getLogger(__name__)

_MODELOS: Dict[TipoVinculo, Any] = {
    TipoVinculo.PARTICIPANTES: Participante,
    TipoVinculo.DOCUMENTOS: DocumentoRelacionado,
    TipoVinculo.NORMAS: NormaRelacionada,
}

_ORDEN = {
    TipoVinculo.PARTICIPANTES: (Participante.rol.asc(), Participante.created_at.asc()),
    TipoVinculo.DOCUMENTOS: (DocumentoRelacionado.tipo_relacion.asc(), DocumentoRelacionado.created_at.asc()),
    TipoVinculo.NORMAS: (NormaRelacionada.punto_norma.asc(), NormaRelacionada.created_at.asc()),
}

_NOT_FOUND: Dict[TipoVinculo, Type[VinculoNotFound]] = {
    TipoVinculo.PARTICIPANTES: ParticipanteNotFound,
    TipoVinculo.DOCUMENTOS: DocumentoNotFound,
    TipoVinculo.NORMAS: NormaNotFound,
}


class VinculosService:
    def __init__(
        self,
        db: AsyncSession,
        entidad_tipo: EntidadTipo,
        entidad_model: Any,
        entidad_not_found: Callable[[UUID], Exception],
    ):
        self.db = db
        self.entidad_tipo = entidad_tipo
        self.entidad_model = entidad_model
        self.entidad_not_found = entidad_not_found
        self.entidades = TenantRepository(entidad_model)
        self.repos = {tipo: TenantRepository(model) for tipo, model in _MODELOS.items()}

    async def _check_entidad(self, organizacion_id: UUID, entidad_id: UUID) -> None:
        if await self.entidades.get(self.db, organizacion_id, entidad_id) is None:
            raise self.entidad_not_found(entidad_id)

    async def list(self, organizacion_id: UUID, entidad_id: UUID, tipo: TipoVinculo) -> Sequence[Any]:
        await self._check_entidad(organizacion_id, entidad_id)
        model = _MODELOS[tipo]
        return await self.repos[tipo].list(
            self.db,
            organizacion_id,
            model.entidad_tipo == self.entidad_tipo,
            model.entidad_id == entidad_id,
            order_by=_ORDEN[tipo],
        )

    async def add(
        self, organizacion_id: UUID, entidad_id: UUID, tipo: TipoVinculo, payload: BaseModel
    ) -> Any:
        async def _work():
            await self._check_entidad(organizacion_id, entidad_id)
            return await self.repos[tipo].create(
                self.db,
                organizacion_id=organizacion_id,
                entidad_tipo=self.entidad_tipo,
                entidad_id=entidad_id,
                **payload.model_dump(),
            )

        vinculo = await commit_or_raise(self.db, _work)
        logger.info(
            "Vínculo agregado tipo=%s %s=%s id=%s", tipo.value, self.entidad_tipo.value, entidad_id, vinculo.id
        )
        return vinculo

    async def delete(
        self, organizacion_id: UUID, entidad_id: UUID, tipo: TipoVinculo, vinculo_id: UUID
    ) -> None:
        model = _MODELOS[tipo]

        async def _work() -> None:
            vinculo = await self.repos[tipo].find_one(
                self.db,
                organizacion_id,
                model.id == vinculo_id,
                model.entidad_tipo == self.entidad_tipo,
                model.entidad_id == entidad_id,
            )
            if vinculo is None:
                raise _NOT_FOUND[tipo](vinculo_id)
            vinculo.is_active = False
            await self.db.flush()

        await commit_or_raise(self.db, _work)
        logger.info("Vínculo dado de baja tipo=%s id=%s", tipo.value, vinculo_id)

    async def contar_activos(self, organizacion_id: UUID, tipo: TipoVinculo) -> int:
        """Vínculos activos cuya entidad también sigue activa."""
        model = _MODELOS[tipo]
        stmt = (
            select(func.count())
            .select_from(model)
            .join(self.entidad_model, self.entidad_model.id == model.entidad_id)
            .where(
                model.organizacion_id == organizacion_id,
                model.entidad_tipo == self.entidad_tipo,
                model.is_active.is_(True),
                self.entidad_model.is_active.is_(True),
            )
        )
        return int((await self.db.execute(stmt)).scalar_one())


__all__ = ["VinculosService"]
