# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/enums/__init__.py

Autor: Equipo SGC
Fecha: 2026-09-19
"""

from enum import StrEnum


class ModalidadCapacitacion(StrEnum):
    PRESENCIAL = "presencial"
    VIRTUAL = "virtual"
    MIXTA = "mixta"


class EstadoCapacitacion(StrEnum):
    PROGRAMADA = "programada"
    EN_CURSO = "en_curso"
    COMPLETADA = "completada"
    CANCELADA = "cancelada"


class EstadoAsistente(StrEnum):
    INSCRITO = "inscrito"
    ASISTIO = "asistio"
    AUSENTE = "ausente"
    APROBADO = "aprobado"
    REPROBADO = "reprobado"


__all__ = ["ModalidadCapacitacion", "EstadoCapacitacion", "EstadoAsistente"]
