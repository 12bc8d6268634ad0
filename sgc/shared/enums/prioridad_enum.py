# -*- coding: utf-8 -*-
"""
sgc/shared/enums/prioridad_enum.py

Escala de prioridad/severidad común a registros, hallazgos y acciones.

Autor: Equipo SGC
Fecha: 2026-09-18
"""

from enum import StrEnum


class Prioridad(StrEnum):
    BAJA = "baja"
    MEDIA = "media"
    ALTA = "alta"
    CRITICA = "critica"


# Orden de listado: crítica primero
PRIORIDAD_ORDEN = {
    Prioridad.CRITICA.value: 0,
    Prioridad.ALTA.value: 1,
    Prioridad.MEDIA.value: 2,
    Prioridad.BAJA.value: 3,
}

PRIORIDADES_URGENTES = frozenset({Prioridad.ALTA.value, Prioridad.CRITICA.value})


__all__ = ["Prioridad", "PRIORIDAD_ORDEN", "PRIORIDADES_URGENTES"]
