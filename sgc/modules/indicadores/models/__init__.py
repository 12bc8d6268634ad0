# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/models/__init__.py
"""

from .indicador_models import Indicador, Medicion

__all__ = ["Indicador", "Medicion"]
