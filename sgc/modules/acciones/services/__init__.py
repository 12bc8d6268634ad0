# -*- coding: utf-8 -*-
"""
sgc/modules/acciones/services/__init__.py
"""

from .accion_service import AccionesService

__all__ = ["AccionesService"]
