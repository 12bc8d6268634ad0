# -*- coding: utf-8 -*-
"""
sgc/modules/acciones/models/__init__.py
"""

from .accion_models import Accion

__all__ = ["Accion"]
