# -*- coding: utf-8 -*-
"""
sgc/modules/vinculos/enums/__init__.py

Autor: Equipo SGC
Fecha: 2026-10-19
"""

from enum import StrEnum


class EntidadTipo(StrEnum):
    MINUTA = "minuta"
    HALLAZGO = "hallazgo"


class TipoVinculo(StrEnum):
    PARTICIPANTES = "participantes"
    DOCUMENTOS = "documentos"
    NORMAS = "normas"


class NivelCumplimiento(StrEnum):
    PENDIENTE = "pendiente"
    CUMPLE = "cumple"
    CUMPLE_PARCIAL = "cumple_parcial"
    NO_CUMPLE = "no_cumple"
    NO_APLICA = "no_aplica"


__all__ = ["EntidadTipo", "TipoVinculo", "NivelCumplimiento"]
