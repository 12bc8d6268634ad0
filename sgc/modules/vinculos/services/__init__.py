# -*- coding: utf-8 -*-
"""
sgc/modules/vinculos/services/__init__.py
"""

from .vinculo_service import VinculosService

__all__ = ["VinculosService"]
