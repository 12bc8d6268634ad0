# -*- coding: utf-8 -*-
"""
sgc/modules/minutas/models/__init__.py
"""

from .minuta_models import Minuta

__all__ = ["Minuta"]
