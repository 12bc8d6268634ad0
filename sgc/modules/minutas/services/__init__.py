# -*- coding: utf-8 -*-
"""
sgc/modules/minutas/services/__init__.py
"""

from .minuta_service import MinutasService

__all__ = ["MinutasService"]
