# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/models/__init__.py
"""

from .registro_models import RegistroProceso

__all__ = ["RegistroProceso"]
