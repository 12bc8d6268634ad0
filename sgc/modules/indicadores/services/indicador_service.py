# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/services/indicador_service.py

Capa de aplicación del módulo de indicadores.

Todas las operaciones reciben `organizacion_id` y filtran por él; un id de
otra organización se trata como inexistente.

Autor: Equipo SGC
Fecha: 2026-09-17
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import and_, func, not_, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import TenantRepository, commit_or_raise
from sgc.shared.utils.dates import as_utc, now_utc
from sgc.shared.utils.text import like_pattern
from sgc.modules.indicadores.enums import (
    CategoriaIndicador,
    EstadoIndicador,
    TipoIndicador,
)
from sgc.modules.indicadores.facades import evaluacion
from sgc.modules.indicadores.facades.errors import (
    CodigoIndicadorDuplicado,
    IndicadorNotFound,
)
from sgc.modules.indicadores.models import Indicador, Medicion
from sgc.modules.indicadores.schemas import (
    IndicadorCreateIn,
    IndicadorUpdateIn,
    MedicionCreateIn,
    PuntoMedicion,
)

logger = logging.getLogger(__name__)

# Campos JSON: se guardan como dict plano
_JSON_FIELDS = ("meta", "umbrales", "tendencia", "alertas", "documentos")


def _activo_criteria(now: datetime):
    """Condición SQL equivalente a evaluacion.esta_activo."""
    return and_(
        Indicador.estado == EstadoIndicador.ACTIVO,
        Indicador.periodicidad_activo.is_(True),
        Indicador.periodicidad_inicio <= now,
        or_(Indicador.periodicidad_fin.is_(None), Indicador.periodicidad_fin >= now),
    )


class IndicadoresService:
    """Comandos y consultas de indicadores. Async."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = TenantRepository(Indicador)
        self.mediciones = TenantRepository(Medicion)

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------
    async def get(self, organizacion_id: UUID, indicador_id: UUID) -> Indicador:
        indicador = await self.repo.get(self.db, organizacion_id, indicador_id)
        if indicador is None:
            raise IndicadorNotFound(indicador_id)
        return indicador

    async def list(
        self,
        organizacion_id: UUID,
        *,
        tipo: Optional[TipoIndicador] = None,
        categoria: Optional[CategoriaIndicador] = None,
        estado: Optional[EstadoIndicador] = None,
        departamento_id: Optional[str] = None,
        proceso_id: Optional[str] = None,
        objetivo_id: Optional[str] = None,
        responsable: Optional[str] = None,
        activo: Optional[bool] = None,
        busqueda: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Tuple[Sequence[Indicador], int]:
        criteria: List[Any] = []
        if tipo is not None:
            criteria.append(Indicador.tipo == tipo)
        if categoria is not None:
            criteria.append(Indicador.categoria == categoria)
        if estado is not None:
            criteria.append(Indicador.estado == estado)
        if departamento_id:
            criteria.append(Indicador.departamento_id == departamento_id)
        if proceso_id:
            criteria.append(Indicador.proceso_id == proceso_id)
        if objetivo_id:
            criteria.append(Indicador.objetivo_id == objetivo_id)
        if responsable:
            criteria.append(Indicador.responsable == responsable)
        if activo is not None:
            activo_sql = _activo_criteria(now_utc())
            criteria.append(activo_sql if activo else not_(activo_sql))
        pattern = like_pattern(busqueda)
        if pattern:
            criteria.append(
                or_(
                    Indicador.nombre.ilike(pattern, escape="\\"),
                    Indicador.codigo.ilike(pattern, escape="\\"),
                    Indicador.descripcion.ilike(pattern, escape="\\"),
                )
            )
        return await self.repo.list_with_total(
            self.db,
            organizacion_id,
            *criteria,
            order_by=(Indicador.nombre.asc(),),
            limit=limit,
            offset=offset,
        )

    async def list_activos(self, organizacion_id: UUID) -> Sequence[Indicador]:
        return await self.repo.list(
            self.db,
            organizacion_id,
            _activo_criteria(now_utc()),
            order_by=(Indicador.nombre.asc(),),
        )

    async def _ultimas_mediciones(self, organizacion_id: UUID) -> Dict[UUID, datetime]:
        stmt = (
            select(Medicion.indicador_id, func.max(Medicion.fecha))
            .where(Medicion.organizacion_id == organizacion_id, Medicion.is_active.is_(True))
            .group_by(Medicion.indicador_id)
        )
        return {row[0]: row[1] for row in (await self.db.execute(stmt)).all()}

    async def list_necesitan_medicion(self, organizacion_id: UUID) -> List[Indicador]:
        now = now_utc()
        activos = await self.list_activos(organizacion_id)
        ultimas = await self._ultimas_mediciones(organizacion_id)
        return [
            ind for ind in activos
            if evaluacion.necesita_medicion(ind, ultimas.get(ind.id), now)
        ]

    async def estadisticas(self, organizacion_id: UUID) -> Dict[str, Any]:
        return {
            "total": await self.repo.count(self.db, organizacion_id),
            "por_tipo": await self.repo.count_by(self.db, organizacion_id, Indicador.tipo, TipoIndicador),
            "por_estado": await self.repo.count_by(self.db, organizacion_id, Indicador.estado, EstadoIndicador),
            "por_categoria": await self.repo.count_by(
                self.db, organizacion_id, Indicador.categoria, CategoriaIndicador
            ),
            "activos": await self.repo.count(self.db, organizacion_id, _activo_criteria(now_utc())),
        }

    # ------------------------------------------------------------------
    # Comandos
    # ------------------------------------------------------------------
    async def _assert_codigo_disponible(
        self, organizacion_id: UUID, codigo: str, exclude_id: Optional[UUID] = None
    ) -> None:
        # Incluye indicadores dados de baja: el código sigue reservado
        stmt = select(Indicador.id).where(
            Indicador.organizacion_id == organizacion_id,
            Indicador.codigo == codigo,
        )
        if exclude_id is not None:
            stmt = stmt.where(Indicador.id != exclude_id)
        if (await self.db.execute(stmt)).first() is not None:
            raise CodigoIndicadorDuplicado(codigo)

    async def create(self, organizacion_id: UUID, payload: IndicadorCreateIn) -> Indicador:
        data = payload.model_dump(mode="json", exclude={"periodicidad"})
        periodicidad = payload.periodicidad
        evaluacion.validar_reglas(
            umbrales=data["umbrales"],
            meta=data["meta"],
            inicio=periodicidad.inicio,
            fin=periodicidad.fin,
        )

        async def _work() -> Indicador:
            await self._assert_codigo_disponible(organizacion_id, payload.codigo)
            indicador = Indicador(
                organizacion_id=organizacion_id,
                periodicidad_inicio=periodicidad.inicio,
                periodicidad_fin=periodicidad.fin,
                periodicidad_activo=periodicidad.activo,
                **data,
            )
            self.db.add(indicador)
            await self.db.flush()
            return indicador

        try:
            indicador = await commit_or_raise(self.db, _work)
        except IntegrityError as e:
            raise CodigoIndicadorDuplicado(payload.codigo) from e
        logger.info("Indicador creado id=%s codigo=%s org=%s", indicador.id, indicador.codigo, organizacion_id)
        return indicador

    async def update(
        self, organizacion_id: UUID, indicador_id: UUID, payload: IndicadorUpdateIn
    ) -> Indicador:
        changes = payload.model_dump(mode="json", exclude_unset=True, exclude={"periodicidad"})
        # None explícito en campos requeridos no se aplica
        changes = {
            k: v for k, v in changes.items()
            if v is not None or k in {"descripcion", "departamento_id", "proceso_id", "objetivo_id",
                                      "formula", "fuente_datos", "metodo_calculo"}
        }
        periodicidad = payload.periodicidad if "periodicidad" in payload.model_fields_set else None

        async def _work() -> Indicador:
            indicador = await self.get(organizacion_id, indicador_id)

            inicio = periodicidad.inicio if periodicidad else indicador.periodicidad_inicio
            fin = periodicidad.fin if periodicidad else indicador.periodicidad_fin
            evaluacion.validar_reglas(
                umbrales=changes.get("umbrales", indicador.umbrales),
                meta=changes.get("meta", indicador.meta),
                inicio=inicio,
                fin=fin,
            )
            if "codigo" in changes and changes["codigo"] != indicador.codigo:
                await self._assert_codigo_disponible(organizacion_id, changes["codigo"], indicador.id)

            for field, value in changes.items():
                setattr(indicador, field, value)
            if periodicidad:
                indicador.periodicidad_inicio = periodicidad.inicio
                indicador.periodicidad_fin = periodicidad.fin
                indicador.periodicidad_activo = periodicidad.activo
            await self.db.flush()
            return indicador

        try:
            indicador = await commit_or_raise(self.db, _work)
        except IntegrityError as e:
            raise CodigoIndicadorDuplicado(changes.get("codigo", "")) from e
        logger.info("Indicador actualizado id=%s campos=%s", indicador.id, sorted(changes))
        return indicador

    async def delete(self, organizacion_id: UUID, indicador_id: UUID) -> None:
        async def _work() -> None:
            indicador = await self.get(organizacion_id, indicador_id)
            indicador.is_active = False
            await self.db.flush()

        await commit_or_raise(self.db, _work)
        logger.info("Indicador dado de baja id=%s org=%s", indicador_id, organizacion_id)

    async def _cambiar_estado(
        self,
        organizacion_id: UUID,
        indicador_id: UUID,
        estado: EstadoIndicador,
        periodicidad_activo: bool,
        motivo: Optional[str] = None,
    ) -> Indicador:
        async def _work() -> Indicador:
            indicador = await self.get(organizacion_id, indicador_id)
            indicador.estado = estado
            indicador.periodicidad_activo = periodicidad_activo
            indicador.motivo_suspension = motivo
            await self.db.flush()
            return indicador

        indicador = await commit_or_raise(self.db, _work)
        logger.info("Indicador id=%s pasa a estado %s", indicador_id, estado)
        return indicador

    async def activar(self, organizacion_id: UUID, indicador_id: UUID) -> Indicador:
        return await self._cambiar_estado(organizacion_id, indicador_id, EstadoIndicador.ACTIVO, True)

    async def desactivar(self, organizacion_id: UUID, indicador_id: UUID) -> Indicador:
        return await self._cambiar_estado(organizacion_id, indicador_id, EstadoIndicador.INACTIVO, False)

    async def suspender(self, organizacion_id: UUID, indicador_id: UUID, motivo: str) -> Indicador:
        return await self._cambiar_estado(
            organizacion_id, indicador_id, EstadoIndicador.SUSPENDIDO, False, motivo
        )

    # ------------------------------------------------------------------
    # Mediciones y tendencia
    # ------------------------------------------------------------------
    async def registrar_medicion(
        self,
        organizacion_id: UUID,
        indicador_id: UUID,
        payload: MedicionCreateIn,
        registrado_por: Optional[UUID] = None,
    ) -> Medicion:
        async def _work() -> Medicion:
            indicador = await self.get(organizacion_id, indicador_id)
            return await self.mediciones.create(
                self.db,
                organizacion_id=organizacion_id,
                indicador_id=indicador.id,
                valor=payload.valor,
                fecha=payload.fecha or now_utc(),
                observaciones=payload.observaciones,
                estado=evaluacion.evaluar_estado(indicador.umbrales, payload.valor),
                cumple_meta=evaluacion.cumple_meta(indicador.meta, payload.valor),
                registrado_por=registrado_por,
            )

        medicion = await commit_or_raise(self.db, _work)
        logger.info(
            "Medición registrada indicador=%s valor=%s estado=%s", indicador_id, medicion.valor, medicion.estado
        )
        return medicion

    async def list_mediciones(
        self, organizacion_id: UUID, indicador_id: UUID
    ) -> Sequence[Medicion]:
        await self.get(organizacion_id, indicador_id)
        return await self.mediciones.list(
            self.db,
            organizacion_id,
            Medicion.indicador_id == indicador_id,
            order_by=(Medicion.fecha.desc(),),
        )

    async def actualizar_tendencia(
        self,
        organizacion_id: UUID,
        indicador_id: UUID,
        puntos: Optional[List[PuntoMedicion]] = None,
    ) -> Indicador:
        """
        Recalcula la tendencia con los puntos dados o, si no hay, con las
        mediciones registradas dentro del periodo de la tendencia (todas si
        en el periodo hay menos de 2).
        """

        async def _work() -> Indicador:
            indicador = await self.get(organizacion_id, indicador_id)
            if puntos is not None:
                pares = [(p.valor, p.fecha) for p in puntos]
            else:
                registradas = await self.list_mediciones(organizacion_id, indicador_id)
                periodo = int((indicador.tendencia or {}).get("periodo") or 30)
                desde = now_utc() - timedelta(days=periodo)
                todas = [(m.valor, m.fecha) for m in registradas]
                en_periodo = [
                    (v, f) for v, f in todas
                    if as_utc(f) >= desde
                ]
                pares = en_periodo if len(en_periodo) >= 2 else todas

            resultado = evaluacion.calcular_tendencia(pares)
            tendencia = dict(indicador.tendencia or {})
            tendencia.setdefault("periodo", 30)
            tendencia["direccion"] = resultado["direccion"].value
            tendencia["valor"] = resultado["valor"]
            indicador.tendencia = tendencia
            await self.db.flush()
            return indicador

        indicador = await commit_or_raise(self.db, _work)
        logger.info("Tendencia actualizada indicador=%s %s", indicador_id, indicador.tendencia)
        return indicador

    async def evaluar(self, organizacion_id: UUID, indicador_id: UUID, valor: float) -> Dict[str, Any]:
        indicador = await self.get(organizacion_id, indicador_id)
        return {
            "valor": valor,
            "estado": evaluacion.evaluar_estado(indicador.umbrales, valor),
            "cumple_meta": evaluacion.cumple_meta(indicador.meta, valor),
        }


__all__ = ["IndicadoresService"]
