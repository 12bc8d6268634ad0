# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/enums/__init__.py

Autor: Equipo SGC
Fecha: 2026-09-20
"""

from enum import StrEnum

from sgc.shared.enums import Prioridad


class EstadoHallazgo(StrEnum):
    DETECCION = "deteccion"
    PLANIFICACION_AI = "planificacion_ai"
    EJECUCION_AI = "ejecucion_ai"
    VERIFICACION_CIERRE = "verificacion_cierre"
    FINALIZADO = "finalizado"


# Orden del ciclo de vida; una transición avanza o retrocede un paso
CICLO_HALLAZGO = (
    EstadoHallazgo.DETECCION,
    EstadoHallazgo.PLANIFICACION_AI,
    EstadoHallazgo.EJECUCION_AI,
    EstadoHallazgo.VERIFICACION_CIERRE,
    EstadoHallazgo.FINALIZADO,
)

ESTADOS_TRATAMIENTO = frozenset({EstadoHallazgo.PLANIFICACION_AI, EstadoHallazgo.EJECUCION_AI})


class OrigenHallazgo(StrEnum):
    AUDITORIA_INTERNA = "auditoria_interna"
    AUDITORIA_EXTERNA = "auditoria_externa"
    REVISION_DIRECCION = "revision_direccion"
    QUEJA_CLIENTE = "queja_cliente"
    OTRO = "otro"


class CategoriaHallazgo(StrEnum):
    NO_CONFORMIDAD = "no_conformidad"
    OPORTUNIDAD_MEJORA = "oportunidad_mejora"
    OBSERVACION = "observacion"


__all__ = [
    "EstadoHallazgo",
    "CICLO_HALLAZGO",
    "ESTADOS_TRATAMIENTO",
    "OrigenHallazgo",
    "CategoriaHallazgo",
    "Prioridad",
]
