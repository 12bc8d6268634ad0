# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/enums/__init__.py

Enums del módulo de indicadores.

Autor: Equipo SGC
Fecha: 2026-09-17
"""

from enum import StrEnum


class TipoIndicador(StrEnum):
    EFECTIVIDAD = "efectividad"
    EFICIENCIA = "eficiencia"
    SATISFACCION = "satisfaccion"
    CONFORMIDAD = "conformidad"
    MEJORA = "mejora"


class CategoriaIndicador(StrEnum):
    CALIDAD = "calidad"
    AMBIENTAL = "ambiental"
    SEGURIDAD = "seguridad"
    FINANCIERO = "financiero"
    OPERACIONAL = "operacional"


class FrecuenciaMedicion(StrEnum):
    DIARIA = "diaria"
    SEMANAL = "semanal"
    MENSUAL = "mensual"
    TRIMESTRAL = "trimestral"
    SEMESTRAL = "semestral"
    ANUAL = "anual"


class TipoMeta(StrEnum):
    MAYOR_QUE = "mayor_que"
    MENOR_QUE = "menor_que"
    IGUAL_A = "igual_a"
    ENTRE = "entre"


class EstadoIndicador(StrEnum):
    ACTIVO = "activo"
    INACTIVO = "inactivo"
    SUSPENDIDO = "suspendido"


class DireccionTendencia(StrEnum):
    ASCENDENTE = "ascendente"
    DESCENDENTE = "descendente"
    ESTABLE = "estable"


class EstadoEvaluacion(StrEnum):
    """Resultado de evaluar un valor medido contra los umbrales."""
    CRITICO = "critico"
    ADVERTENCIA = "advertencia"
    REGULAR = "regular"
    SATISFACTORIO = "satisfactorio"


__all__ = [
    "TipoIndicador",
    "CategoriaIndicador",
    "FrecuenciaMedicion",
    "TipoMeta",
    "EstadoIndicador",
    "DireccionTendencia",
    "EstadoEvaluacion",
]
