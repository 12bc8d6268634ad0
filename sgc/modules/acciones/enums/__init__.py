# -*- coding: utf-8 -*-
"""
sgc/modules/acciones/enums/__init__.py

Autor: Equipo SGC
Fecha: 2026-09-20
"""

from enum import StrEnum

from sgc.shared.enums import Prioridad


class EstadoAccion(StrEnum):
    P1_PLANIFICACION_ACCION = "p1_planificacion_accion"
    P2_EJECUCION_ACCION = "p2_ejecucion_accion"
    P3_PLANIFICACION_VERIFICACION = "p3_planificacion_verificacion"
    P4_EJECUCION_VERIFICACION = "p4_ejecucion_verificacion"
    COMPLETADO = "completado"


class Eficacia(StrEnum):
    PENDIENTE = "pendiente"
    EFICAZ = "eficaz"
    NO_EFICAZ = "no_eficaz"


__all__ = ["EstadoAccion", "Eficacia", "Prioridad"]
