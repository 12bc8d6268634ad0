# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/facades/alertas.py

Cálculos sobre un registro de proceso (sin acceso a base de datos):
progreso de acciones, vencimiento, días restantes, necesidad de atención
y generación de la alerta vigente.

Las funciones aceptan el modelo ORM o cualquier objeto con los mismos
atributos (estado, prioridad, fecha_vencimiento, acciones).

Autor: Equipo SGC
Fecha: 2026-09-18
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Dict, Iterable, Mapping, Optional

from sgc.shared.enums import PRIORIDADES_URGENTES, Prioridad
from sgc.shared.utils.dates import as_utc, now_utc
from sgc.modules.registros_procesos.enums import (
    ESTADOS_FINALES,
    EstadoAccion,
    EstadoRegistro,
    TipoAlerta,
)
from sgc.modules.registros_procesos.facades.errors import RegistroValidationError

_PESO_ACCION = {
    EstadoAccion.COMPLETADA.value: 100,
    EstadoAccion.EN_PROGRESO.value: 50,
}

_SEGUNDOS_DIA = 24 * 60 * 60


def alertas_vacias() -> Dict[str, Any]:
    return {"generadas": False, "tipo": None, "mensaje": None, "enviada": False}


# ---------------------------------------------------------------------------
# Validaciones
# ---------------------------------------------------------------------------
def validar_fechas(fecha: datetime, fecha_vencimiento: Optional[datetime]) -> None:
    if fecha_vencimiento is not None and as_utc(fecha_vencimiento) <= as_utc(fecha):
        raise RegistroValidationError("La fecha de vencimiento debe ser posterior a la fecha del registro")


def validar_acciones(acciones: Iterable[Mapping[str, Any]]) -> None:
    for accion in acciones:
        inicio, fin = accion.get("fecha_inicio"), accion.get("fecha_fin")
        if inicio is None or fin is None:
            continue
        if _to_datetime(inicio) >= _to_datetime(fin):
            raise RegistroValidationError("La fecha de inicio de la acción debe ser anterior a la fecha de fin")


def _to_datetime(value: Any) -> datetime:
    # Las acciones se guardan en JSON: las fechas llegan como texto ISO
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return as_utc(value)


# ---------------------------------------------------------------------------
# Cálculos
# ---------------------------------------------------------------------------
def progreso_general(acciones: Iterable[Mapping[str, Any]]) -> int:
    acciones = list(acciones or [])
    if not acciones:
        return 0
    total = sum(_PESO_ACCION.get(str(a.get("estado")), 0) for a in acciones)
    # Redondeo "half up" sobre valores no negativos
    return int(math.floor(total / len(acciones) + 0.5))


def esta_vencido(registro, now: Optional[datetime] = None) -> bool:
    if registro.fecha_vencimiento is None:
        return False
    now = now or now_utc()
    return as_utc(registro.fecha_vencimiento) < now and str(registro.estado) not in ESTADOS_FINALES


def dias_restantes(registro, now: Optional[datetime] = None) -> Optional[int]:
    if registro.fecha_vencimiento is None:
        return None
    now = now or now_utc()
    delta = (as_utc(registro.fecha_vencimiento) - now).total_seconds()
    return math.ceil(delta / _SEGUNDOS_DIA)


def necesita_atencion(registro, now: Optional[datetime] = None) -> bool:
    now = now or now_utc()
    if esta_vencido(registro, now):
        return True
    dias = dias_restantes(registro, now)
    prioridad = str(registro.prioridad)
    if dias is not None and dias <= 3 and prioridad in PRIORIDADES_URGENTES:
        return True
    return prioridad == Prioridad.CRITICA.value and str(registro.estado) == EstadoRegistro.ABIERTO.value


def generar_alertas(registro, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Devuelve el dict `alertas` que corresponde al registro en `now`.

    Conserva `enviada` cuando el mensaje no cambia, para no reenviar la
    misma alerta en cada recálculo.
    """
    now = now or now_utc()
    dias = dias_restantes(registro, now)
    cerrado = str(registro.estado) in ESTADOS_FINALES

    tipo: Optional[TipoAlerta] = None
    mensaje: Optional[str] = None
    if esta_vencido(registro, now):
        tipo = TipoAlerta.VENCIMIENTO
        mensaje = (
            f"Registro vencido desde hace {abs(dias)} días. Se requiere atención inmediata."
        )
    elif dias is not None and dias <= 1 and not cerrado:
        tipo = TipoAlerta.VENCIMIENTO
        mensaje = f"Registro vence en {dias} día(s). Se requiere atención urgente."
    elif dias is not None and dias <= 3 and not cerrado and str(registro.prioridad) in PRIORIDADES_URGENTES:
        tipo = TipoAlerta.RECORDATORIO
        mensaje = f"Registro de prioridad {registro.prioridad} vence en {dias} días."

    if mensaje is None:
        return alertas_vacias()

    previas = registro.alertas or {}
    enviada = bool(previas.get("enviada")) and previas.get("mensaje") == mensaje
    return {"generadas": True, "tipo": tipo.value, "mensaje": mensaje, "enviada": enviada}


def resumen_progreso(registro, now: Optional[datetime] = None) -> Dict[str, Any]:
    now = now or now_utc()
    return {
        "progreso_general": progreso_general(registro.acciones),
        "dias_restantes": dias_restantes(registro, now),
        "esta_vencido": esta_vencido(registro, now),
        "necesita_atencion": necesita_atencion(registro, now),
    }


__all__ = [
    "alertas_vacias",
    "validar_fechas",
    "validar_acciones",
    "progreso_general",
    "esta_vencido",
    "dias_restantes",
    "necesita_atencion",
    "generar_alertas",
    "resumen_progreso",
]
