# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/services/__init__.py
"""

from .registro_service import RegistrosProcesosService

__all__ = ["RegistrosProcesosService"]
