# -*- coding: utf-8 -*-
"""
sgc/modules/auditorias/services/auditoria_service.py

Servicio de auditorías.

- El código se genera como AUD-{año}-{NNN} cuando no se indica.
- Al crear se aceptan aspectos y relaciones en el mismo payload.
- Las relaciones no se duplican (mismo destino_tipo + destino_id).

Autor: Equipo SGC
Fecha: 2026-09-19
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import TenantRepository, commit_or_raise
from sgc.shared.utils.dates import now_utc
from sgc.shared.utils.text import like_pattern
from sgc.modules.auditorias.enums import EstadoAuditoria
from sgc.modules.auditorias.facades.errors import (
    AspectoNotFound,
    AuditoriaNotFound,
    CodigoAuditoriaDuplicado,
    RelacionDuplicada,
    RelacionNotFound,
)
from sgc.modules.auditorias.facades.numeracion import siguiente_codigo
from sgc.modules.auditorias.models import Auditoria, AuditoriaAspecto, AuditoriaRelacion
from sgc.modules.auditorias.schemas import (
    AspectoIn,
    AuditoriaCreateIn,
    AuditoriaUpdateIn,
    RelacionIn,
)

logger = logging.getLogger(__name__)

_NULLABLE_FIELDS = {"responsable_id", "alcance", "criterios"}


class AuditoriasService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = TenantRepository(Auditoria)
        self.aspectos = TenantRepository(AuditoriaAspecto)
        self.relaciones = TenantRepository(AuditoriaRelacion)

    # ------------------------------------------------------------------
    # Auditorías
    # ------------------------------------------------------------------
    async def get(self, organizacion_id: UUID, auditoria_id: UUID) -> Auditoria:
        auditoria = await self.repo.get(self.db, organizacion_id, auditoria_id)
        if auditoria is None:
            raise AuditoriaNotFound(auditoria_id)
        return auditoria

    async def get_detalle(
        self, organizacion_id: UUID, auditoria_id: UUID
    ) -> Tuple[Auditoria, Sequence[AuditoriaAspecto], Sequence[AuditoriaRelacion]]:
        aspectos = await self.list_aspectos(organizacion_id, auditoria_id)
        relaciones = await self.list_relaciones(organizacion_id, auditoria_id)
        return await self.get(organizacion_id, auditoria_id), aspectos, relaciones

    async def list(
        self,
        organizacion_id: UUID,
        *,
        estado: Optional[EstadoAuditoria] = None,
        area: Optional[str] = None,
        busqueda: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Tuple[List[Auditoria], int]:
        criteria: List[Any] = []
        if estado is not None:
            criteria.append(Auditoria.estado == estado)
        pattern = like_pattern(busqueda)
        if pattern:
            criteria.append(
                or_(
                    Auditoria.titulo.ilike(pattern, escape="\\"),
                    Auditoria.codigo.ilike(pattern, escape="\\"),
                    Auditoria.objetivos.ilike(pattern, escape="\\"),
                )
            )
        order_by = (Auditoria.fecha_programada.desc(),)
        if not area:
            items, total = await self.repo.list_with_total(
                self.db, organizacion_id, *criteria, order_by=order_by, limit=limit, offset=offset
            )
            return list(items), total

        # Las áreas son una lista JSON: el filtro se aplica en memoria
        buscada = area.strip().lower()
        todas = await self.repo.list(self.db, organizacion_id, *criteria, order_by=order_by)
        filtradas = [a for a in todas if any(str(x).lower() == buscada for x in (a.areas or []))]
        fin = None if limit is None else offset + limit
        return filtradas[offset:fin], len(filtradas)

    async def _assert_codigo_disponible(
        self, organizacion_id: UUID, codigo: str, exclude_id: Optional[UUID] = None
    ) -> None:
        stmt = select(Auditoria.id).where(
            Auditoria.organizacion_id == organizacion_id, Auditoria.codigo == codigo
        )
        if exclude_id is not None:
            stmt = stmt.where(Auditoria.id != exclude_id)
        if (await self.db.execute(stmt)).first() is not None:
            raise CodigoAuditoriaDuplicado(codigo)

    async def create(self, organizacion_id: UUID, payload: AuditoriaCreateIn) -> Auditoria:
        data = payload.model_dump(exclude={"codigo", "aspectos", "relaciones"})

        async def _work() -> Auditoria:
            if payload.codigo:
                codigo = payload.codigo
                await self._assert_codigo_disponible(organizacion_id, codigo)
            else:
                codigo = await siguiente_codigo(self.db, organizacion_id, now_utc())
            auditoria = await self.repo.create(
                self.db, organizacion_id=organizacion_id, codigo=codigo, **data
            )
            for aspecto in payload.aspectos:
                await self._crear_aspecto(organizacion_id, auditoria.id, aspecto)
            vistos = set()
            for relacion in payload.relaciones:
                clave = (relacion.destino_tipo, relacion.destino_id)
                if clave in vistos:
                    raise RelacionDuplicada(*clave)
                vistos.add(clave)
                await self._crear_relacion(organizacion_id, auditoria.id, relacion)
            return auditoria

        try:
            auditoria = await commit_or_raise(self.db, _work)
        except IntegrityError as e:
            raise CodigoAuditoriaDuplicado(payload.codigo or "") from e
        logger.info("Auditoría creada id=%s codigo=%s org=%s", auditoria.id, auditoria.codigo, organizacion_id)
        return auditoria

    async def update(
        self, organizacion_id: UUID, auditoria_id: UUID, payload: AuditoriaUpdateIn
    ) -> Auditoria:
        changes = {
            k: v for k, v in payload.model_dump(exclude_unset=True).items()
            if v is not None or k in _NULLABLE_FIELDS
        }

        async def _work() -> Auditoria:
            auditoria = await self.get(organizacion_id, auditoria_id)
            if "codigo" in changes and changes["codigo"] != auditoria.codigo:
                await self._assert_codigo_disponible(organizacion_id, changes["codigo"], auditoria.id)
            for field, value in changes.items():
                setattr(auditoria, field, value)
            await self.db.flush()
            return auditoria

        try:
            auditoria = await commit_or_raise(self.db, _work)
        except IntegrityError as e:
            raise CodigoAuditoriaDuplicado(changes.get("codigo", "")) from e
        logger.info("Auditoría actualizada id=%s campos=%s", auditoria_id, sorted(changes))
        return auditoria

    async def delete(self, organizacion_id: UUID, auditoria_id: UUID) -> None:
        async def _work() -> None:
            auditoria = await self.get(organizacion_id, auditoria_id)
            auditoria.is_active = False
            await self.db.flush()

        await commit_or_raise(self.db, _work)
        logger.info("Auditoría dada de baja id=%s", auditoria_id)

    # ------------------------------------------------------------------
    # Aspectos
    # ------------------------------------------------------------------
    async def list_aspectos(self, organizacion_id: UUID, auditoria_id: UUID) -> Sequence[AuditoriaAspecto]:
        await self.get(organizacion_id, auditoria_id)
        return await self.aspectos.list(
            self.db,
            organizacion_id,
            AuditoriaAspecto.auditoria_id == auditoria_id,
            order_by=(AuditoriaAspecto.created_at.asc(),),
        )

    async def _crear_aspecto(
        self, organizacion_id: UUID, auditoria_id: UUID, payload: AspectoIn
    ) -> AuditoriaAspecto:
        return await self.aspectos.create(
            self.db, organizacion_id=organizacion_id, auditoria_id=auditoria_id, **payload.model_dump()
        )

    async def _get_aspecto(
        self, organizacion_id: UUID, auditoria_id: UUID, aspecto_id: UUID
    ) -> AuditoriaAspecto:
        aspecto = await self.aspectos.find_one(
            self.db,
            organizacion_id,
            AuditoriaAspecto.id == aspecto_id,
            AuditoriaAspecto.auditoria_id == auditoria_id,
        )
        if aspecto is None:
            raise AspectoNotFound(aspecto_id)
        return aspecto

    async def add_aspecto(
        self, organizacion_id: UUID, auditoria_id: UUID, payload: AspectoIn
    ) -> AuditoriaAspecto:
        async def _work() -> AuditoriaAspecto:
            await self.get(organizacion_id, auditoria_id)
            return await self._crear_aspecto(organizacion_id, auditoria_id, payload)

        aspecto = await commit_or_raise(self.db, _work)
        logger.info("Aspecto agregado auditoria=%s aspecto=%s", auditoria_id, aspecto.id)
        return aspecto

    async def update_aspecto(
        self, organizacion_id: UUID, auditoria_id: UUID, aspecto_id: UUID, payload: AspectoIn
    ) -> AuditoriaAspecto:
        changes = payload.model_dump(exclude_unset=True)

        async def _work() -> AuditoriaAspecto:
            aspecto = await self._get_aspecto(organizacion_id, auditoria_id, aspecto_id)
            for field, value in changes.items():
                setattr(aspecto, field, value)
            await self.db.flush()
            return aspecto

        return await commit_or_raise(self.db, _work)

    async def delete_aspecto(self, organizacion_id: UUID, auditoria_id: UUID, aspecto_id: UUID) -> None:
        async def _work() -> None:
            aspecto = await self._get_aspecto(organizacion_id, auditoria_id, aspecto_id)
            aspecto.is_active = False
            await self.db.flush()

        await commit_or_raise(self.db, _work)

    # ------------------------------------------------------------------
    # Relaciones
    # ------------------------------------------------------------------
    async def list_relaciones(
        self, organizacion_id: UUID, auditoria_id: UUID
    ) -> Sequence[AuditoriaRelacion]:
        await self.get(organizacion_id, auditoria_id)
        return await self.relaciones.list(
            self.db,
            organizacion_id,
            AuditoriaRelacion.auditoria_id == auditoria_id,
            order_by=(AuditoriaRelacion.created_at.asc(),),
        )

    async def _crear_relacion(
        self, organizacion_id: UUID, auditoria_id: UUID, payload: RelacionIn
    ) -> AuditoriaRelacion:
        return await self.relaciones.create(
            self.db, organizacion_id=organizacion_id, auditoria_id=auditoria_id, **payload.model_dump()
        )

    async def add_relacion(
        self, organizacion_id: UUID, auditoria_id: UUID, payload: RelacionIn
    ) -> AuditoriaRelacion:
        async def _work() -> AuditoriaRelacion:
            await self.get(organizacion_id, auditoria_id)
            existente = await self.relaciones.find_one(
                self.db,
                organizacion_id,
                AuditoriaRelacion.auditoria_id == auditoria_id,
                AuditoriaRelacion.destino_tipo == payload.destino_tipo,
                AuditoriaRelacion.destino_id == payload.destino_id,
            )
            if existente is not None:
                raise RelacionDuplicada(payload.destino_tipo, payload.destino_id)
            return await self._crear_relacion(organizacion_id, auditoria_id, payload)

        relacion = await commit_or_raise(self.db, _work)
        logger.info(
            "Relación agregada auditoria=%s destino=%s:%s",
            auditoria_id, relacion.destino_tipo, relacion.destino_id,
        )
        return relacion

    async def delete_relacion(self, organizacion_id: UUID, auditoria_id: UUID, relacion_id: UUID) -> None:
        async def _work() -> None:
            relacion = await self.relaciones.find_one(
                self.db,
                organizacion_id,
                AuditoriaRelacion.id == relacion_id,
                AuditoriaRelacion.auditoria_id == auditoria_id,
            )
            if relacion is None:
                raise RelacionNotFound(relacion_id)
            relacion.is_active = False
            await self.db.flush()

        await commit_or_raise(self.db, _work)


__all__ = ["AuditoriasService"]
