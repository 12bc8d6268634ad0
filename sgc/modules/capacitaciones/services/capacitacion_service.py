# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/services/capacitacion_service.py

Servicio de capacitaciones: CRUD, temas (ordenados) y asistentes con
control de duplicados y cupo máximo.

Autor: Equipo SGC
Fecha: 2026-09-19
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import TenantRepository, commit_or_raise
from sgc.shared.utils.text import like_pattern
from sgc.modules.capacitaciones.enums import EstadoCapacitacion, ModalidadCapacitacion
from sgc.modules.capacitaciones.facades.errors import (
    AsistenteDuplicado,
    AsistenteNotFound,
    CapacitacionNotFound,
    CupoCompleto,
    TemaNotFound,
)
from sgc.modules.capacitaciones.facades.validaciones import validar_fechas
from sgc.modules.capacitaciones.models import (
    Capacitacion,
    CapacitacionAsistente,
    CapacitacionTema,
)
from sgc.modules.capacitaciones.schemas import (
    AsistenteCreateIn,
    AsistenteUpdateIn,
    CapacitacionCreateIn,
    CapacitacionUpdateIn,
    TemaCreateIn,
    TemaUpdateIn,
)

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {"nombre", "fecha_inicio", "modalidad", "estado", "certificacion"}


class CapacitacionesService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = TenantRepository(Capacitacion)
        self.temas = TenantRepository(CapacitacionTema)
        self.asistentes = TenantRepository(CapacitacionAsistente)

    # ------------------------------------------------------------------
    # Capacitaciones
    # ------------------------------------------------------------------
    async def get(self, organizacion_id: UUID, capacitacion_id: UUID) -> Capacitacion:
        capacitacion = await self.repo.get(self.db, organizacion_id, capacitacion_id)
        if capacitacion is None:
            raise CapacitacionNotFound(capacitacion_id)
        return capacitacion

    async def list(
        self,
        organizacion_id: UUID,
        *,
        estado: Optional[EstadoCapacitacion] = None,
        modalidad: Optional[ModalidadCapacitacion] = None,
        busqueda: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Tuple[Sequence[Capacitacion], int]:
        criteria: List[Any] = []
        if estado is not None:
            criteria.append(Capacitacion.estado == estado)
        if modalidad is not None:
            criteria.append(Capacitacion.modalidad == modalidad)
        pattern = like_pattern(busqueda)
        if pattern:
            criteria.append(
                or_(
                    Capacitacion.nombre.ilike(pattern, escape="\\"),
                    Capacitacion.descripcion.ilike(pattern, escape="\\"),
                    Capacitacion.instructor.ilike(pattern, escape="\\"),
                )
            )
        return await self.repo.list_with_total(
            self.db,
            organizacion_id,
            *criteria,
            order_by=(Capacitacion.fecha_inicio.desc(),),
            limit=limit,
            offset=offset,
        )

    async def create(self, organizacion_id: UUID, payload: CapacitacionCreateIn) -> Capacitacion:
        validar_fechas(payload.fecha_inicio, payload.fecha_fin)

        async def _work() -> Capacitacion:
            return await self.repo.create(
                self.db, organizacion_id=organizacion_id, **payload.model_dump()
            )

        capacitacion = await commit_or_raise(self.db, _work)
        logger.info("Capacitación creada id=%s org=%s", capacitacion.id, organizacion_id)
        return capacitacion

    async def update(
        self, organizacion_id: UUID, capacitacion_id: UUID, payload: CapacitacionUpdateIn
    ) -> Capacitacion:
        changes = {
            k: v for k, v in payload.model_dump(exclude_unset=True).items()
            if v is not None or k not in _REQUIRED_FIELDS
        }

        async def _work() -> Capacitacion:
            capacitacion = await self.get(organizacion_id, capacitacion_id)
            validar_fechas(
                changes.get("fecha_inicio", capacitacion.fecha_inicio),
                changes.get("fecha_fin", capacitacion.fecha_fin),
            )
            for field, value in changes.items():
                setattr(capacitacion, field, value)
            await self.db.flush()
            return capacitacion

        capacitacion = await commit_or_raise(self.db, _work)
        logger.info("Capacitación actualizada id=%s campos=%s", capacitacion_id, sorted(changes))
        return capacitacion

    async def delete(self, organizacion_id: UUID, capacitacion_id: UUID) -> None:
        async def _work() -> None:
            capacitacion = await self.get(organizacion_id, capacitacion_id)
            capacitacion.is_active = False
            await self.db.flush()

        await commit_or_raise(self.db, _work)
        logger.info("Capacitación dada de baja id=%s", capacitacion_id)

    # ------------------------------------------------------------------
    # Temas
    # ------------------------------------------------------------------
    async def list_temas(self, organizacion_id: UUID, capacitacion_id: UUID) -> Sequence[CapacitacionTema]:
        await self.get(organizacion_id, capacitacion_id)
        return await self.temas.list(
            self.db,
            organizacion_id,
            CapacitacionTema.capacitacion_id == capacitacion_id,
            order_by=(CapacitacionTema.orden.asc(), CapacitacionTema.created_at.asc()),
        )

    async def _get_tema(self, organizacion_id: UUID, capacitacion_id: UUID, tema_id: UUID) -> CapacitacionTema:
        tema = await self.temas.find_one(
            self.db,
            organizacion_id,
            CapacitacionTema.id == tema_id,
            CapacitacionTema.capacitacion_id == capacitacion_id,
        )
        if tema is None:
            raise TemaNotFound(tema_id)
        return tema

    async def add_tema(
        self, organizacion_id: UUID, capacitacion_id: UUID, payload: TemaCreateIn
    ) -> CapacitacionTema:
        async def _work() -> CapacitacionTema:
            await self.get(organizacion_id, capacitacion_id)
            orden = payload.orden
            if orden is None:
                # Sin orden explícito el tema va al final
                stmt = select(func.max(CapacitacionTema.orden)).where(
                    CapacitacionTema.capacitacion_id == capacitacion_id,
                    CapacitacionTema.is_active.is_(True),
                )
                ultimo = (await self.db.execute(stmt)).scalar_one_or_none()
                orden = 1 if ultimo is None else ultimo + 1
            return await self.temas.create(
                self.db,
                organizacion_id=organizacion_id,
                capacitacion_id=capacitacion_id,
                titulo=payload.titulo,
                descripcion=payload.descripcion,
                orden=orden,
            )

        tema = await commit_or_raise(self.db, _work)
        logger.info("Tema agregado capacitacion=%s tema=%s", capacitacion_id, tema.id)
        return tema

    async def update_tema(
        self, organizacion_id: UUID, capacitacion_id: UUID, tema_id: UUID, payload: TemaUpdateIn
    ) -> CapacitacionTema:
        changes = {
            k: v for k, v in payload.model_dump(exclude_unset=True).items()
            if v is not None or k == "descripcion"
        }

        async def _work() -> CapacitacionTema:
            tema = await self._get_tema(organizacion_id, capacitacion_id, tema_id)
            for field, value in changes.items():
                setattr(tema, field, value)
            await self.db.flush()
            return tema

        return await commit_or_raise(self.db, _work)

    async def delete_tema(self, organizacion_id: UUID, capacitacion_id: UUID, tema_id: UUID) -> None:
        async def _work() -> None:
            tema = await self._get_tema(organizacion_id, capacitacion_id, tema_id)
            tema.is_active = False
            await self.db.flush()

        await commit_or_raise(self.db, _work)
        logger.info("Tema dado de baja capacitacion=%s tema=%s", capacitacion_id, tema_id)

    # ------------------------------------------------------------------
    # Asistentes
    # ------------------------------------------------------------------
    async def list_asistentes(
        self, organizacion_id: UUID, capacitacion_id: UUID
    ) -> Sequence[CapacitacionAsistente]:
        await self.get(organizacion_id, capacitacion_id)
        return await self.asistentes.list(
            self.db,
            organizacion_id,
            CapacitacionAsistente.capacitacion_id == capacitacion_id,
            order_by=(CapacitacionAsistente.fecha_inscripcion.asc(),),
        )

    async def _get_asistente(
        self, organizacion_id: UUID, capacitacion_id: UUID, asistente_id: UUID
    ) -> CapacitacionAsistente:
        asistente = await self.asistentes.find_one(
            self.db,
            organizacion_id,
            CapacitacionAsistente.id == asistente_id,
            CapacitacionAsistente.capacitacion_id == capacitacion_id,
        )
        if asistente is None:
            raise AsistenteNotFound(asistente_id)
        return asistente

    async def add_asistente(
        self, organizacion_id: UUID, capacitacion_id: UUID, payload: AsistenteCreateIn
    ) -> CapacitacionAsistente:
        async def _work() -> CapacitacionAsistente:
            capacitacion = await self.get(organizacion_id, capacitacion_id)
            en_capacitacion = CapacitacionAsistente.capacitacion_id == capacitacion_id

            existente = await self.asistentes.find_one(
                self.db,
                organizacion_id,
                en_capacitacion,
                CapacitacionAsistente.empleado_id == payload.empleado_id,
            )
            if existente is not None:
                raise AsistenteDuplicado(payload.empleado_id)

            if capacitacion.cupo_maximo is not None:
                inscritos = await self.asistentes.count(self.db, organizacion_id, en_capacitacion)
                if inscritos >= capacitacion.cupo_maximo:
                    raise CupoCompleto(capacitacion.cupo_maximo)

            return await self.asistentes.create(
                self.db,
                organizacion_id=organizacion_id,
                capacitacion_id=capacitacion_id,
                **payload.model_dump(),
            )

        asistente = await commit_or_raise(self.db, _work)
        logger.info(
            "Asistente inscrito capacitacion=%s empleado=%s", capacitacion_id, asistente.empleado_id
        )
        return asistente

    async def update_asistente(
        self,
        organizacion_id: UUID,
        capacitacion_id: UUID,
        asistente_id: UUID,
        payload: AsistenteUpdateIn,
    ) -> CapacitacionAsistente:
        changes = {
            k: v for k, v in payload.model_dump(exclude_unset=True).items()
            if v is not None or k != "estado"
        }

        async def _work() -> CapacitacionAsistente:
            asistente = await self._get_asistente(organizacion_id, capacitacion_id, asistente_id)
            for field, value in changes.items():
                setattr(asistente, field, value)
            await self.db.flush()
            return asistente

        return await commit_or_raise(self.db, _work)

    async def delete_asistente(
        self, organizacion_id: UUID, capacitacion_id: UUID, asistente_id: UUID
    ) -> None:
        async def _work() -> None:
            asistente = await self._get_asistente(organizacion_id, capacitacion_id, asistente_id)
            asistente.is_active = False
            await self.db.flush()

        await commit_or_raise(self.db, _work)
        logger.info("Asistente dado de baja capacitacion=%s asistente=%s", capacitacion_id, asistente_id)


__all__ = ["CapacitacionesService"]
