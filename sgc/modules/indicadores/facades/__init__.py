# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/facades/__init__.py
"""

from .errors import (
    CodigoIndicadorDuplicado,
    IndicadorNotFound,
    IndicadorValidationError,
    MedicionesInsuficientes,
)

__all__ = [
    "CodigoIndicadorDuplicado",
    "IndicadorNotFound",
    "IndicadorValidationError",
    "MedicionesInsuficientes",
]
