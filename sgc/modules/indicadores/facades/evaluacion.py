# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/facades/evaluacion.py

Cálculos sobre indicadores, sin acceso a base de datos:
- validar_reglas: umbrales ordenados, periodicidad y rango de la meta
- evaluar_estado / cumple_meta: clasificación de un valor medido
- esta_activo / proxima_medicion / necesita_medicion: vigencia y calendario
- calcular_tendencia: variación porcentual entre primera y última medición

Autor: Equipo SGC
Fecha: 2026-09-17
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from sgc.shared.utils.dates import add_months, as_utc, now_utc
from sgc.modules.indicadores.enums import (
    DireccionTendencia,
    EstadoEvaluacion,
    EstadoIndicador,
    FrecuenciaMedicion,
    TipoMeta,
)
from sgc.modules.indicadores.facades.errors import (
    IndicadorValidationError,
    MedicionesInsuficientes,
)

# Variación porcentual (en valor absoluto) a partir de la cual hay tendencia
UMBRAL_TENDENCIA_PCT = 5.0

_INTERVALO_DIAS = {
    FrecuenciaMedicion.DIARIA: 1,
    FrecuenciaMedicion.SEMANAL: 7,
}
_INTERVALO_MESES = {
    FrecuenciaMedicion.MENSUAL: 1,
    FrecuenciaMedicion.TRIMESTRAL: 3,
    FrecuenciaMedicion.SEMESTRAL: 6,
    FrecuenciaMedicion.ANUAL: 12,
}


# ---------------------------------------------------------------------------
# Validaciones de negocio
# ---------------------------------------------------------------------------
def validar_umbrales(umbrales: Mapping[str, Any]) -> None:
    if not (umbrales["critico"] < umbrales["advertencia"] < umbrales["satisfactorio"]):
        raise IndicadorValidationError(
            "Los umbrales deben estar en orden: crítico < advertencia < satisfactorio"
        )


def validar_periodicidad(inicio: datetime, fin: Optional[datetime]) -> None:
    if fin is not None and as_utc(inicio) >= as_utc(fin):
        raise IndicadorValidationError(
            "La fecha de inicio de la periodicidad debe ser anterior a la fecha de fin"
        )


def validar_meta(meta: Mapping[str, Any]) -> None:
    if meta.get("tipo") != TipoMeta.ENTRE:
        return
    minimo, maximo = meta.get("valor_minimo"), meta.get("valor_maximo")
    if minimo is not None and maximo is not None and minimo > maximo:
        raise IndicadorValidationError(
            "El valor mínimo de la meta no puede ser mayor que el valor máximo"
        )


def validar_reglas(
    *,
    umbrales: Mapping[str, Any],
    meta: Mapping[str, Any],
    inicio: datetime,
    fin: Optional[datetime],
) -> None:
    validar_periodicidad(inicio, fin)
    validar_umbrales(umbrales)
    validar_meta(meta)


# ---------------------------------------------------------------------------
# Evaluación de valores
# ---------------------------------------------------------------------------
def evaluar_estado(umbrales: Mapping[str, Any], valor: float) -> EstadoEvaluacion:
    if valor <= umbrales["critico"]:
        return EstadoEvaluacion.CRITICO
    if valor <= umbrales["advertencia"]:
        return EstadoEvaluacion.ADVERTENCIA
    if valor >= umbrales["satisfactorio"]:
        return EstadoEvaluacion.SATISFACTORIO
    return EstadoEvaluacion.REGULAR


def cumple_meta(meta: Mapping[str, Any], valor: float) -> bool:
    tipo = meta.get("tipo")
    objetivo = meta.get("valor")
    if tipo == TipoMeta.MAYOR_QUE:
        return valor > objetivo
    if tipo == TipoMeta.MENOR_QUE:
        return valor < objetivo
    if tipo == TipoMeta.IGUAL_A:
        return valor == objetivo
    if tipo == TipoMeta.ENTRE:
        minimo = meta.get("valor_minimo")
        maximo = meta.get("valor_maximo")
        minimo = 0 if minimo is None else minimo
        maximo = math.inf if maximo is None else maximo
        return minimo <= valor <= maximo
    return False


# ---------------------------------------------------------------------------
# Vigencia y calendario de medición
# ---------------------------------------------------------------------------
def esta_activo(indicador, now: Optional[datetime] = None) -> bool:
    now = now or now_utc()
    fin = as_utc(indicador.periodicidad_fin)
    return (
        indicador.estado == EstadoIndicador.ACTIVO
        and bool(indicador.periodicidad_activo)
        and as_utc(indicador.periodicidad_inicio) <= now
        and (fin is None or fin >= now)
    )


def proxima_medicion(frecuencia: FrecuenciaMedicion, desde: datetime) -> datetime:
    desde = as_utc(desde)
    frecuencia = FrecuenciaMedicion(frecuencia)
    if frecuencia in _INTERVALO_DIAS:
        return desde + timedelta(days=_INTERVALO_DIAS[frecuencia])
    return add_months(desde, _INTERVALO_MESES[frecuencia])


def necesita_medicion(
    indicador,
    ultima_medicion: Optional[datetime],
    now: Optional[datetime] = None,
) -> bool:
    """
    Activo y con la próxima medición vencida. Sin mediciones previas la
    referencia es el inicio de la periodicidad.
    """
    now = now or now_utc()
    if not esta_activo(indicador, now):
        return False
    referencia = ultima_medicion or indicador.periodicidad_inicio
    return now >= proxima_medicion(indicador.frecuencia, referencia)


# ---------------------------------------------------------------------------
# Tendencia
# ---------------------------------------------------------------------------
def calcular_tendencia(puntos: Iterable[Tuple[float, datetime]]) -> Dict[str, Any]:
    """
    Calcula dirección y magnitud de la tendencia.

    Args:
        puntos: pares (valor, fecha) en cualquier orden

    Returns:
        {"direccion": DireccionTendencia, "valor": |variación %| con 2 decimales}

    Raises:
        MedicionesInsuficientes: menos de 2 puntos
    """
    ordenados = sorted(((v, as_utc(f)) for v, f in puntos), key=lambda p: p[1])
    if len(ordenados) < 2:
        raise MedicionesInsuficientes()

    primera, ultima = ordenados[0][0], ordenados[-1][0]
    if primera == 0:
        cambio = 0.0 if ultima == 0 else math.copysign(100.0, ultima)
    else:
        cambio = (ultima - primera) / abs(primera) * 100

    if cambio > UMBRAL_TENDENCIA_PCT:
        direccion = DireccionTendencia.ASCENDENTE
    elif cambio < -UMBRAL_TENDENCIA_PCT:
        direccion = DireccionTendencia.DESCENDENTE
    else:
        direccion = DireccionTendencia.ESTABLE

    return {"direccion": direccion, "valor": round(abs(cambio), 2)}


__all__ = [
    "UMBRAL_TENDENCIA_PCT",
    "validar_umbrales",
    "validar_periodicidad",
    "validar_meta",
    "validar_reglas",
    "evaluar_estado",
    "cumple_meta",
    "esta_activo",
    "proxima_medicion",
    "necesita_medicion",
    "calcular_tendencia",
]
