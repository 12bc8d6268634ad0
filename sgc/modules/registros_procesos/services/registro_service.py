# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/services/registro_service.py

Servicio de registros de procesos.

Responsabilidades:
- CRUD con unicidad de código por organización
- Consultas por proceso/departamento/responsable, vencidos, con alertas
  y que necesitan atención
- Cierre, seguimiento y actualización de acciones individuales
- Regeneración de alertas (en cada cambio y desde el job periódico)

Autor: Equipo SGC
Fecha: 2026-09-18
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import case, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import TenantRepository, commit_or_raise
from sgc.shared.enums import PRIORIDAD_ORDEN, Prioridad
from sgc.shared.utils.dates import now_utc
from sgc.shared.utils.text import like_pattern
from sgc.modules.registros_procesos.enums import (
    ESTADOS_FINALES,
    CategoriaRegistro,
    EstadoRegistro,
    TipoRegistro,
)
from sgc.modules.registros_procesos.facades import alertas as calc
from sgc.modules.registros_procesos.facades.errors import (
    CodigoRegistroDuplicado,
    RegistroNotFound,
    RegistroValidationError,
    RegistroYaCerrado,
)
from sgc.modules.registros_procesos.models import RegistroProceso
from sgc.modules.registros_procesos.schemas import (
    AccionUpdateIn,
    CerrarRegistroIn,
    RegistroCreateIn,
    RegistroUpdateIn,
    SeguimientoIn,
)

logger = logging.getLogger(__name__)

_ORDEN_PRIORIDAD = case(PRIORIDAD_ORDEN, value=RegistroProceso.prioridad, else_=len(PRIORIDAD_ORDEN))
_ORDEN_LISTADO = (_ORDEN_PRIORIDAD.asc(), RegistroProceso.fecha.desc())

# Campos opcionales que admiten null explícito en un PUT
_NULLABLE_FIELDS = {"departamento_id", "fecha_vencimiento"}

# El job marca `vencido` a los abiertos/en progreso: siguen pendientes
_ESTADOS_PENDIENTES = (EstadoRegistro.ABIERTO, EstadoRegistro.EN_PROGRESO, EstadoRegistro.VENCIDO)


def _vencido_criteria(now: datetime):
    return (
        RegistroProceso.fecha_vencimiento.is_not(None),
        RegistroProceso.fecha_vencimiento < now,
        RegistroProceso.estado.not_in(list(ESTADOS_FINALES)),
    )


def _con_alertas_criteria():
    return RegistroProceso.alertas["generadas"].as_boolean().is_(True)


class RegistrosProcesosService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = TenantRepository(RegistroProceso)

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------
    async def get(self, organizacion_id: UUID, registro_id: UUID) -> RegistroProceso:
        registro = await self.repo.get(self.db, organizacion_id, registro_id)
        if registro is None:
            raise RegistroNotFound(registro_id)
        return registro

    async def list(
        self,
        organizacion_id: UUID,
        *,
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
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Tuple[Sequence[RegistroProceso], int]:
        criteria: List[Any] = []
        if tipo is not None:
            criteria.append(RegistroProceso.tipo == tipo)
        if estado is not None:
            criteria.append(RegistroProceso.estado == estado)
        if prioridad is not None:
            criteria.append(RegistroProceso.prioridad == prioridad)
        if categoria is not None:
            criteria.append(RegistroProceso.categoria == categoria)
        if proceso_id:
            criteria.append(RegistroProceso.proceso_id == proceso_id)
        if departamento_id:
            criteria.append(RegistroProceso.departamento_id == departamento_id)
        if responsable:
            criteria.append(RegistroProceso.responsable == responsable)
        if fecha_inicio is not None:
            criteria.append(RegistroProceso.fecha >= fecha_inicio)
        if fecha_fin is not None:
            criteria.append(RegistroProceso.fecha <= fecha_fin)
        if vencido:
            criteria.extend(_vencido_criteria(now_utc()))
        pattern = like_pattern(busqueda)
        if pattern:
            criteria.append(
                or_(
                    RegistroProceso.titulo.ilike(pattern, escape="\\"),
                    RegistroProceso.codigo.ilike(pattern, escape="\\"),
                    RegistroProceso.descripcion.ilike(pattern, escape="\\"),
                )
            )
        return await self.repo.list_with_total(
            self.db, organizacion_id, *criteria, order_by=_ORDEN_LISTADO, limit=limit, offset=offset
        )

    async def list_vencidos(self, organizacion_id: UUID) -> Sequence[RegistroProceso]:
        return await self.repo.list(
            self.db,
            organizacion_id,
            *_vencido_criteria(now_utc()),
            order_by=(RegistroProceso.fecha_vencimiento.asc(),),
        )

    async def list_necesitan_atencion(self, organizacion_id: UUID) -> List[RegistroProceso]:
        now = now_utc()
        abiertos = await self.repo.list(
            self.db,
            organizacion_id,
            RegistroProceso.estado.in_(_ESTADOS_PENDIENTES),
            order_by=_ORDEN_LISTADO,
        )
        return [r for r in abiertos if calc.necesita_atencion(r, now)]

    async def list_con_alertas(self, organizacion_id: UUID) -> Sequence[RegistroProceso]:
        return await self.repo.list(
            self.db, organizacion_id, _con_alertas_criteria(), order_by=_ORDEN_LISTADO
        )

    async def progreso(self, organizacion_id: UUID, registro_id: UUID) -> Dict[str, Any]:
        registro = await self.get(organizacion_id, registro_id)
        return calc.resumen_progreso(registro)

    async def estadisticas(self, organizacion_id: UUID) -> Dict[str, Any]:
        org = organizacion_id
        return {
            "total": await self.repo.count(self.db, org),
            "por_tipo": await self.repo.count_by(self.db, org, RegistroProceso.tipo, TipoRegistro),
            "por_estado": await self.repo.count_by(self.db, org, RegistroProceso.estado, EstadoRegistro),
            "por_prioridad": await self.repo.count_by(self.db, org, RegistroProceso.prioridad, Prioridad),
            "por_categoria": await self.repo.count_by(
                self.db, org, RegistroProceso.categoria, CategoriaRegistro
            ),
            "vencidos": await self.repo.count(self.db, org, *_vencido_criteria(now_utc())),
            "con_alertas": await self.repo.count(self.db, org, _con_alertas_criteria()),
        }

    # ------------------------------------------------------------------
    # Comandos
    # ------------------------------------------------------------------
    async def _assert_codigo_disponible(
        self, organizacion_id: UUID, codigo: str, exclude_id: Optional[UUID] = None
    ) -> None:
        stmt = select(RegistroProceso.id).where(
            RegistroProceso.organizacion_id == organizacion_id,
            RegistroProceso.codigo == codigo,
        )
        if exclude_id is not None:
            stmt = stmt.where(RegistroProceso.id != exclude_id)
        if (await self.db.execute(stmt)).first() is not None:
            raise CodigoRegistroDuplicado(codigo)

    async def create(self, organizacion_id: UUID, payload: RegistroCreateIn) -> RegistroProceso:
        fecha = payload.fecha or now_utc()
        calc.validar_fechas(fecha, payload.fecha_vencimiento)
        data = payload.model_dump(mode="json", exclude={"fecha", "fecha_vencimiento"})
        calc.validar_acciones(data["acciones"])

        async def _work() -> RegistroProceso:
            await self._assert_codigo_disponible(organizacion_id, payload.codigo)
            registro = RegistroProceso(
                organizacion_id=organizacion_id,
                fecha=fecha,
                fecha_vencimiento=payload.fecha_vencimiento,
                seguimiento=[],
                cierre=None,
                alertas=calc.alertas_vacias(),
                **data,
            )
            registro.alertas = calc.generar_alertas(registro)
            self.db.add(registro)
            await self.db.flush()
            return registro

        try:
            registro = await commit_or_raise(self.db, _work)
        except IntegrityError as e:
            raise CodigoRegistroDuplicado(payload.codigo) from e
        logger.info("Registro creado id=%s codigo=%s org=%s", registro.id, registro.codigo, organizacion_id)
        return registro

    async def update(
        self, organizacion_id: UUID, registro_id: UUID, payload: RegistroUpdateIn
    ) -> RegistroProceso:
        changes = {
            k: v
            for k, v in payload.model_dump(mode="json", exclude_unset=True).items()
            if v is not None or k in _NULLABLE_FIELDS
        }
        # Las fechas de nivel registro se asignan como datetime, no como texto
        for field in ("fecha", "fecha_vencimiento"):
            if field in changes:
                changes[field] = getattr(payload, field)

        async def _work() -> RegistroProceso:
            registro = await self.get(organizacion_id, registro_id)
            calc.validar_fechas(
                changes.get("fecha", registro.fecha),
                changes.get("fecha_vencimiento", registro.fecha_vencimiento),
            )
            if "acciones" in changes:
                calc.validar_acciones(changes["acciones"])
            if "codigo" in changes and changes["codigo"] != registro.codigo:
                await self._assert_codigo_disponible(organizacion_id, changes["codigo"], registro.id)

            for field, value in changes.items():
                setattr(registro, field, value)
            registro.alertas = calc.generar_alertas(registro)
            await self.db.flush()
            return registro

        try:
            registro = await commit_or_raise(self.db, _work)
        except IntegrityError as e:
            raise CodigoRegistroDuplicado(changes.get("codigo", "")) from e
        logger.info("Registro actualizado id=%s campos=%s", registro.id, sorted(changes))
        return registro

    async def delete(self, organizacion_id: UUID, registro_id: UUID) -> None:
        async def _work() -> None:
            registro = await self.get(organizacion_id, registro_id)
            registro.is_active = False
            await self.db.flush()

        await commit_or_raise(self.db, _work)
        logger.info("Registro dado de baja id=%s org=%s", registro_id, organizacion_id)

    async def cerrar(
        self, organizacion_id: UUID, registro_id: UUID, payload: CerrarRegistroIn
    ) -> RegistroProceso:
        async def _work() -> RegistroProceso:
            registro = await self.get(organizacion_id, registro_id)
            if str(registro.estado) in ESTADOS_FINALES:
                raise RegistroYaCerrado(str(registro.estado))
            registro.estado = EstadoRegistro.CERRADO
            registro.cierre = {
                "fecha": now_utc().isoformat(),
                **payload.model_dump(mode="json"),
            }
            registro.alertas = calc.alertas_vacias()
            await self.db.flush()
            return registro

        registro = await commit_or_raise(self.db, _work)
        logger.info("Registro cerrado id=%s resultado=%s", registro_id, payload.resultado)
        return registro

    async def agregar_seguimiento(
        self, organizacion_id: UUID, registro_id: UUID, payload: SeguimientoIn
    ) -> RegistroProceso:
        if not 0 <= payload.progreso <= 100:
            logger.warning("Seguimiento rechazado registro=%s progreso=%s", registro_id, payload.progreso)
            raise RegistroValidationError("El progreso debe estar entre 0 y 100")

        async def _work() -> RegistroProceso:
            registro = await self.get(organizacion_id, registro_id)
            entrada = {"fecha": now_utc().isoformat(), **payload.model_dump(mode="json")}
            registro.seguimiento = [*(registro.seguimiento or []), entrada]
            if str(registro.estado) == EstadoRegistro.ABIERTO.value:
                registro.estado = EstadoRegistro.EN_PROGRESO
            registro.alertas = calc.generar_alertas(registro)
            await self.db.flush()
            return registro

        registro = await commit_or_raise(self.db, _work)
        logger.info("Seguimiento agregado registro=%s progreso=%s", registro_id, payload.progreso)
        return registro

    async def actualizar_accion(
        self, organizacion_id: UUID, registro_id: UUID, index: int, payload: AccionUpdateIn
    ) -> RegistroProceso:
        async def _work() -> RegistroProceso:
            registro = await self.get(organizacion_id, registro_id)
            acciones = [dict(a) for a in (registro.acciones or [])]
            if not 0 <= index < len(acciones):
                raise RegistroValidationError("Índice de acción inválido")
            acciones[index].update(payload.model_dump(mode="json", exclude_unset=True, exclude_none=True))
            calc.validar_acciones([acciones[index]])
            registro.acciones = acciones
            await self.db.flush()
            return registro

        registro = await commit_or_raise(self.db, _work)
        logger.info("Acción %s actualizada en registro=%s", index, registro_id)
        return registro

    # ------------------------------------------------------------------
    # Job periódico
    # ------------------------------------------------------------------
    async def refrescar_alertas(self, organizacion_id: Optional[UUID] = None) -> Dict[str, int]:
        """
        Recalcula alertas de los registros no finalizados y marca como
        `vencido` los abiertos/en progreso cuya fecha de vencimiento pasó.

        Sin `organizacion_id` recorre todas las organizaciones (uso del
        scheduler).
        """
        now = now_utc()
        stmt = select(RegistroProceso).where(
            RegistroProceso.is_active.is_(True),
            RegistroProceso.estado.not_in(list(ESTADOS_FINALES)),
        )
        if organizacion_id is not None:
            stmt = stmt.where(RegistroProceso.organizacion_id == organizacion_id)

        async def _work() -> Dict[str, int]:
            registros = (await self.db.execute(stmt)).scalars().all()
            vencidos = actualizados = 0
            for registro in registros:
                if calc.esta_vencido(registro, now) and str(registro.estado) != EstadoRegistro.VENCIDO.value:
                    registro.estado = EstadoRegistro.VENCIDO
                    vencidos += 1
                nuevas = calc.generar_alertas(registro, now)
                if nuevas != (registro.alertas or {}):
                    registro.alertas = nuevas
                    actualizados += 1
            await self.db.flush()
            return {"revisados": len(registros), "vencidos": vencidos, "alertas_actualizadas": actualizados}

        resumen = await commit_or_raise(self.db, _work)
        logger.info("Alertas de registros refrescadas: %s", resumen)
        return resumen


__all__ = ["RegistrosProcesosService"]
