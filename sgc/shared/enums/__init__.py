# -*- coding: utf-8 -*-
"""
sgc/shared/enums/__init__.py

Enums compartidos entre varios módulos. Los específicos de cada módulo
viven en sgc/modules/<modulo>/enums/.
"""

from .prioridad_enum import PRIORIDAD_ORDEN, PRIORIDADES_URGENTES, Prioridad

__all__ = ["Prioridad", "PRIORIDAD_ORDEN", "PRIORIDADES_URGENTES"]
