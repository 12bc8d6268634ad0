# -*- coding: utf-8 -*-
"""
sgc/modules/auditorias/enums/__init__.py

Autor: Equipo SGC
Fecha: 2026-09-19
"""

from enum import StrEnum


class EstadoAuditoria(StrEnum):
    PLANIFICADA = "planificada"
    EN_PROGRESO = "en_progreso"
    COMPLETADA = "completada"
    CANCELADA = "cancelada"


class Conformidad(StrEnum):
    CONFORME = "conforme"
    NO_CONFORME = "no_conforme"
    OBSERVACION = "observacion"
    OPORTUNIDAD_MEJORA = "oportunidad_mejora"


__all__ = ["EstadoAuditoria", "Conformidad"]
