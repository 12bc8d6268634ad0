# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/services/__init__.py
"""

from .indicador_service import IndicadoresService

__all__ = ["IndicadoresService"]
