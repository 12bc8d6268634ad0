# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/services/hallazgo_service.py

Servicio de hallazgos.

- Numeración HAL-{año}-{NNN} correlativa por organización.
- El estado solo cambia por `cambiar_estado` (un paso adelante o atrás).
- Al llegar a finalizado se registra fecha_cierre.

Autor: Equipo SGC
Fecha: 2026-09-20
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import TenantRepository, commit_or_raise
from sgc.shared.utils.dates import now_utc
from sgc.shared.utils.text import like_pattern
from sgc.modules.hallazgos.enums import (
    ESTADOS_TRATAMIENTO,
    CategoriaHallazgo,
    EstadoHallazgo,
    OrigenHallazgo,
    Prioridad,
)
from sgc.modules.hallazgos.facades.ciclo import siguiente_numero, validar_transicion
from sgc.modules.hallazgos.facades.errors import (
    HallazgoNotFound,
    HallazgoValidationError,
    NumeroHallazgoDuplicado,
)
from sgc.modules.hallazgos.models import Hallazgo
from sgc.modules.hallazgos.schemas import CambioEstadoIn, HallazgoCreateIn, HallazgoUpdateIn

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {"titulo", "descripcion", "prioridad", "severidad"}


class HallazgosService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = TenantRepository(Hallazgo)

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------
    async def get(self, organizacion_id: UUID, hallazgo_id: UUID) -> Hallazgo:
        hallazgo = await self.repo.get(self.db, organizacion_id, hallazgo_id)
        if hallazgo is None:
            raise HallazgoNotFound(hallazgo_id)
        return hallazgo

    async def list(
        self,
        organizacion_id: UUID,
        *,
        estado: Optional[EstadoHallazgo] = None,
        prioridad: Optional[Prioridad] = None,
        categoria: Optional[CategoriaHallazgo] = None,
        origen: Optional[OrigenHallazgo] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Tuple[Sequence[Hallazgo], int]:
        criteria: List[Any] = []
        if estado is not None:
            criteria.append(Hallazgo.estado == estado)
        if prioridad is not None:
            criteria.append(Hallazgo.prioridad == prioridad)
        if categoria is not None:
            criteria.append(Hallazgo.categoria == categoria)
        if origen is not None:
            criteria.append(Hallazgo.origen == origen)
        return await self.repo.list_with_total(
            self.db,
            organizacion_id,
            *criteria,
            order_by=(Hallazgo.created_at.desc(),),
            limit=limit,
            offset=offset,
        )

    async def search(
        self, organizacion_id: UUID, q: Optional[str], *, page: int = 1, limit: int = 20
    ) -> Tuple[Sequence[Hallazgo], Dict[str, Any]]:
        """Búsqueda por título o descripción con paginación por página."""
        pattern = like_pattern(q)
        if pattern is None:
            raise HallazgoValidationError("Término de búsqueda requerido")
        criterio = or_(
            Hallazgo.titulo.ilike(pattern, escape="\\"),
            Hallazgo.descripcion.ilike(pattern, escape="\\"),
        )
        items, total = await self.repo.list_with_total(
            self.db,
            organizacion_id,
            criterio,
            order_by=(Hallazgo.created_at.desc(),),
            limit=limit,
            offset=(page - 1) * limit,
        )
        total_pages = math.ceil(total / limit) if limit else 0
        pagination = {
            "page": page,
            "limit": limit,
            "total": total,
            "total_pages": total_pages,
            "has_next": page < total_pages,
            "has_prev": page > 1,
        }
        return items, pagination

    async def recent(self, organizacion_id: UUID, limit: int = 10) -> Sequence[Hallazgo]:
        return await self.repo.list(
            self.db, organizacion_id, order_by=(Hallazgo.created_at.desc(),), limit=limit
        )

    async def estadisticas(self, organizacion_id: UUID) -> Dict[str, Any]:
        por_estado = await self.repo.count_by(self.db, organizacion_id, Hallazgo.estado, EstadoHallazgo)
        return {
            "total": sum(por_estado.values()),
            "en_deteccion": por_estado[EstadoHallazgo.DETECCION],
            "en_tratamiento": sum(por_estado[e] for e in ESTADOS_TRATAMIENTO),
            "en_verificacion": por_estado[EstadoHallazgo.VERIFICACION_CIERRE],
            "cerrados": por_estado[EstadoHallazgo.FINALIZADO],
            "por_prioridad": await self.repo.count_by(
                self.db, organizacion_id, Hallazgo.prioridad, Prioridad
            ),
            "por_categoria": await self.repo.count_by(
                self.db, organizacion_id, Hallazgo.categoria, CategoriaHallazgo
            ),
            "por_origen": await self.repo.count_by(
                self.db, organizacion_id, Hallazgo.origen, OrigenHallazgo
            ),
        }

    # ------------------------------------------------------------------
    # Comandos
    # ------------------------------------------------------------------
    async def create(self, organizacion_id: UUID, payload: HallazgoCreateIn) -> Hallazgo:
        data = payload.model_dump(exclude={"fecha_deteccion"})
        numero = ""

        async def _work() -> Hallazgo:
            nonlocal numero
            ahora = now_utc()
            numero = await siguiente_numero(self.db, organizacion_id, ahora)
            return await self.repo.create(
                self.db,
                organizacion_id=organizacion_id,
                numero_hallazgo=numero,
                estado=EstadoHallazgo.DETECCION,
                fecha_deteccion=payload.fecha_deteccion or ahora,
                **data,
            )

        try:
            hallazgo = await commit_or_raise(self.db, _work)
        except IntegrityError as e:
            raise NumeroHallazgoDuplicado(numero) from e
        logger.info(
            "Hallazgo creado id=%s numero=%s org=%s", hallazgo.id, hallazgo.numero_hallazgo, organizacion_id
        )
        return hallazgo

    async def update(
        self, organizacion_id: UUID, hallazgo_id: UUID, payload: HallazgoUpdateIn
    ) -> Hallazgo:
        changes = {
            k: v for k, v in payload.model_dump(exclude_unset=True).items()
            if v is not None or k not in _REQUIRED_FIELDS
        }
        if not changes:
            raise HallazgoValidationError("No hay campos válidos para actualizar")

        async def _work() -> Hallazgo:
            hallazgo = await self.get(organizacion_id, hallazgo_id)
            for field, value in changes.items():
                setattr(hallazgo, field, value)
            await self.db.flush()
            return hallazgo

        hallazgo = await commit_or_raise(self.db, _work)
        logger.info("Hallazgo actualizado id=%s campos=%s", hallazgo_id, sorted(changes))
        return hallazgo

    async def cambiar_estado(
        self, organizacion_id: UUID, hallazgo_id: UUID, payload: CambioEstadoIn
    ) -> Hallazgo:
        async def _work() -> Hallazgo:
            hallazgo = await self.get(organizacion_id, hallazgo_id)
            anterior = hallazgo.estado
            validar_transicion(anterior, payload.estado)
            hallazgo.estado = payload.estado
            if payload.estado == EstadoHallazgo.FINALIZADO:
                hallazgo.fecha_cierre = now_utc()
            await self.db.flush()
            logger.info(
                "Hallazgo id=%s estado %s -> %s", hallazgo.id, anterior, payload.estado
            )
            return hallazgo

        return await commit_or_raise(self.db, _work)

    async def delete(self, organizacion_id: UUID, hallazgo_id: UUID) -> None:
        async def _work() -> None:
            hallazgo = await self.get(organizacion_id, hallazgo_id)
            hallazgo.is_active = False
            await self.db.flush()

        await commit_or_raise(self.db, _work)
        logger.info("Hallazgo dado de baja id=%s", hallazgo_id)


__all__ = ["HallazgosService"]
