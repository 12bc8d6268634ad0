# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/services/__init__.py
"""

from .hallazgo_service import HallazgosService

__all__ = ["HallazgosService"]
