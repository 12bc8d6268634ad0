# -*- coding: utf-8 -*-
"""
sgc/modules/acciones/services/accion_service.py

Servicio de acciones de mejora.

Autor: Equipo SGC
Fecha: 2026-09-20
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import TenantRepository, commit_or_raise, next_numero, orden_numerico
from sgc.modules.acciones.facades.errors import (
    AccionNotFound,
    HallazgoInexistente,
    NumeroAccionDuplicado,
    SinCamposActualizables,
)
from sgc.modules.acciones.models import Accion
from sgc.modules.acciones.schemas import AccionCreateIn, AccionUpdateIn
from sgc.modules.hallazgos.models import Hallazgo

logger = logging.getLogger(__name__)

PREFIJO_ACCION = "AM-"

_REQUIRED_FIELDS = {"descripcion_accion", "prioridad", "estado", "eficacia"}


class AccionesService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = TenantRepository(Accion)
        self.hallazgos = TenantRepository(Hallazgo)

    async def get(self, organizacion_id: UUID, accion_id: UUID) -> Accion:
        accion = await self.repo.get(self.db, organizacion_id, accion_id)
        if accion is None:
            raise AccionNotFound(accion_id)
        return accion

    async def _assert_hallazgo(self, organizacion_id: UUID, hallazgo_id: UUID) -> None:
        if await self.hallazgos.get(self.db, organizacion_id, hallazgo_id) is None:
            raise HallazgoInexistente(hallazgo_id)

    async def list(
        self, organizacion_id: UUID, *, hallazgo_id: Optional[UUID] = None
    ) -> Sequence[Accion]:
        criteria: List[Any] = []
        if hallazgo_id is not None:
            criteria.append(Accion.hallazgo_id == hallazgo_id)
        return await self.repo.list(
            self.db, organizacion_id, *criteria, order_by=orden_numerico(Accion.numero_accion)
        )

    async def list_por_hallazgo(self, organizacion_id: UUID, hallazgo_id: UUID) -> Sequence[Accion]:
        await self._assert_hallazgo(organizacion_id, hallazgo_id)
        return await self.list(organizacion_id, hallazgo_id=hallazgo_id)

    async def create(self, organizacion_id: UUID, payload: AccionCreateIn) -> Accion:
        numero = ""

        async def _work() -> Accion:
            nonlocal numero
            await self._assert_hallazgo(organizacion_id, payload.hallazgo_id)
            numero = await next_numero(
                self.db, Accion.numero_accion, Accion.organizacion_id, organizacion_id, PREFIJO_ACCION
            )
            return await self.repo.create(
                self.db, organizacion_id=organizacion_id, numero_accion=numero, **payload.model_dump()
            )

        try:
            accion = await commit_or_raise(self.db, _work)
        except IntegrityError as e:
            raise NumeroAccionDuplicado(numero) from e
        logger.info(
            "Acción creada id=%s numero=%s hallazgo=%s", accion.id, accion.numero_accion, accion.hallazgo_id
        )
        return accion

    async def update(self, organizacion_id: UUID, accion_id: UUID, payload: AccionUpdateIn) -> Accion:
        changes = {
            k: v for k, v in payload.model_dump(exclude_unset=True).items()
            if v is not None or k not in _REQUIRED_FIELDS
        }
        if not changes:
            raise SinCamposActualizables()

        async def _work() -> Accion:
            accion = await self.get(organizacion_id, accion_id)
            for field, value in changes.items():
                setattr(accion, field, value)
            await self.db.flush()
            return accion

        accion = await commit_or_raise(self.db, _work)
        logger.info("Acción actualizada id=%s campos=%s", accion_id, sorted(changes))
        return accion

    async def delete(self, organizacion_id: UUID, accion_id: UUID) -> None:
        async def _work() -> None:
            accion = await self.get(organizacion_id, accion_id)
            accion.is_active = False
            await self.db.flush()

        await commit_or_raise(self.db, _work)
        logger.info("Acción dada de baja id=%s", accion_id)


__all__ = ["AccionesService", "PREFIJO_ACCION"]
