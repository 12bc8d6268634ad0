# -*- coding: utf-8 -*-
"""
sgc/modules/minutas/services/minuta_service.py

Servicio de minutas: CRUD, búsqueda, estadísticas y duplicado. Los
participantes, documentos y normas viven en `sgc.modules.vinculos`.

Autor: Equipo SGC
Fecha: 2026-09-21
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import TenantRepository, commit_or_raise
from sgc.shared.utils.dates import now_utc, start_of_month
from sgc.shared.utils.text import like_pattern
from sgc.modules.minutas.facades.errors import MinutaNotFound, MinutaValidationError
from sgc.modules.minutas.models import Minuta
from sgc.modules.minutas.schemas import MinutaCreateIn, MinutaUpdateIn
from sgc.modules.vinculos.enums import EntidadTipo, TipoVinculo
from sgc.modules.vinculos.services import VinculosService

logger = logging.getLogger(__name__)

_COPIA_SUFIJO = " (Copia)"


class MinutasService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = TenantRepository(Minuta)
        self.vinculos = VinculosService(db, EntidadTipo.MINUTA, Minuta, MinutaNotFound)

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------
    async def get(self, organizacion_id: UUID, minuta_id: UUID) -> Minuta:
        minuta = await self.repo.get(self.db, organizacion_id, minuta_id)
        if minuta is None:
            raise MinutaNotFound(minuta_id)
        return minuta

    async def list(
        self, organizacion_id: UUID, *, limit: Optional[int] = None, offset: int = 0
    ):
        return await self.repo.list_with_total(
            self.db,
            organizacion_id,
            order_by=(Minuta.created_at.desc(),),
            limit=limit,
            offset=offset,
        )

    async def search(self, organizacion_id: UUID, q: Optional[str]) -> Sequence[Minuta]:
        pattern = like_pattern(q)
        if pattern is None:
            raise MinutaValidationError("Término de búsqueda requerido")
        return await self.repo.list(
            self.db,
            organizacion_id,
            or_(
                Minuta.titulo.ilike(pattern, escape="\\"),
                Minuta.responsable.ilike(pattern, escape="\\"),
                Minuta.descripcion.ilike(pattern, escape="\\"),
                Minuta.agenda.ilike(pattern, escape="\\"),
            ),
            order_by=(Minuta.created_at.desc(),),
        )

    async def recent(self, organizacion_id: UUID, limit: int = 10) -> Sequence[Minuta]:
        return await self.repo.list(
            self.db, organizacion_id, order_by=(Minuta.created_at.desc(),), limit=limit
        )

    async def list_por_responsable(self, organizacion_id: UUID, responsable: str) -> Sequence[Minuta]:
        pattern = like_pattern(responsable)
        if pattern is None:
            return []
        return await self.repo.list(
            self.db,
            organizacion_id,
            Minuta.responsable.ilike(pattern, escape="\\"),
            order_by=(Minuta.created_at.desc(),),
        )

    async def estadisticas(self, organizacion_id: UUID) -> Dict[str, int]:
        total = await self.repo.count(self.db, organizacion_id)
        este_mes = await self.repo.count(
            self.db, organizacion_id, Minuta.created_at >= start_of_month(now_utc())
        )
        # Vínculos activos de minutas activas
        return {
            "total": total,
            "participantes": await self.vinculos.contar_activos(organizacion_id, TipoVinculo.PARTICIPANTES),
            "documentos": await self.vinculos.contar_activos(organizacion_id, TipoVinculo.DOCUMENTOS),
            "normas": await self.vinculos.contar_activos(organizacion_id, TipoVinculo.NORMAS),
            "este_mes": este_mes,
        }

    # ------------------------------------------------------------------
    # Comandos
    # ------------------------------------------------------------------
    async def create(self, organizacion_id: UUID, payload: MinutaCreateIn) -> Minuta:
        async def _work() -> Minuta:
            return await self.repo.create(self.db, organizacion_id=organizacion_id, **payload.model_dump())

        minuta = await commit_or_raise(self.db, _work)
        logger.info("Minuta creada id=%s org=%s", minuta.id, organizacion_id)
        return minuta

    async def update(self, organizacion_id: UUID, minuta_id: UUID, payload: MinutaUpdateIn) -> Minuta:
        changes = {
            k: v for k, v in payload.model_dump(exclude_unset=True).items()
            if v is not None or k != "titulo"
        }

        async def _work() -> Minuta:
            minuta = await self.get(organizacion_id, minuta_id)
            for field, value in changes.items():
                setattr(minuta, field, value)
            await self.db.flush()
            return minuta

        minuta = await commit_or_raise(self.db, _work)
        logger.info("Minuta actualizada id=%s campos=%s", minuta_id, sorted(changes))
        return minuta

    async def delete(self, organizacion_id: UUID, minuta_id: UUID) -> None:
        async def _work() -> None:
            minuta = await self.get(organizacion_id, minuta_id)
            minuta.is_active = False
            await self.db.flush()

        await commit_or_raise(self.db, _work)
        logger.info("Minuta dada de baja id=%s", minuta_id)

    async def duplicate(self, organizacion_id: UUID, minuta_id: UUID) -> Minuta:
        """Copia titulo, responsable y descripción; el título lleva el sufijo (Copia)."""

        async def _work() -> Minuta:
            original = await self.get(organizacion_id, minuta_id)
            titulo = f"{original.titulo}{_COPIA_SUFIJO}"[:200]
            return await self.repo.create(
                self.db,
                organizacion_id=organizacion_id,
                titulo=titulo,
                responsable=original.responsable,
                descripcion=original.descripcion,
            )

        copia = await commit_or_raise(self.db, _work)
        logger.info("Minuta duplicada original=%s copia=%s", minuta_id, copia.id)
        return copia


__all__ = ["MinutasService"]
