# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/facades/ciclo.py

Ciclo de vida y numeración de hallazgos.

deteccion → planificacion_ai → ejecucion_ai → verificacion_cierre → finalizado

Se permite avanzar o retroceder un paso; finalizado es terminal.

Autor: Equipo SGC
Fecha: 2026-09-20
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import next_numero
from sgc.modules.hallazgos.enums import CICLO_HALLAZGO, EstadoHallazgo
from sgc.modules.hallazgos.facades.errors import TransicionInvalida
from sgc.modules.hallazgos.models import Hallazgo


def transicion_permitida(actual: EstadoHallazgo, nuevo: EstadoHallazgo) -> bool:
    if actual == EstadoHallazgo.FINALIZADO:
        return False
    return abs(CICLO_HALLAZGO.index(nuevo) - CICLO_HALLAZGO.index(actual)) == 1


def validar_transicion(actual: EstadoHallazgo, nuevo: EstadoHallazgo) -> None:
    if not transicion_permitida(actual, nuevo):
        raise TransicionInvalida(str(actual), str(nuevo))


def prefijo_hallazgo(fecha: datetime) -> str:
    return f"HAL-{fecha.year}-"


async def siguiente_numero(session: AsyncSession, organizacion_id: UUID, fecha: datetime) -> str:
    return await next_numero(
        session,
        Hallazgo.numero_hallazgo,
        Hallazgo.organizacion_id,
        organizacion_id,
        prefijo_hallazgo(fecha),
    )


__all__ = ["transicion_permitida", "validar_transicion", "prefijo_hallazgo", "siguiente_numero"]
