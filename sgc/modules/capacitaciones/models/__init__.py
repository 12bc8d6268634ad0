# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/models/__init__.py
"""

from .capacitacion_models import Capacitacion, CapacitacionAsistente, CapacitacionTema

__all__ = ["Capacitacion", "CapacitacionTema", "CapacitacionAsistente"]
