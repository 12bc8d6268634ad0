# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/services/__init__.py
"""

from .capacitacion_service import CapacitacionesService

__all__ = ["CapacitacionesService"]
