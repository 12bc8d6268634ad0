# -*- coding: utf-8 -*-
"""
sgc/modules/vinculos/routes/__init__.py
"""

from .vinculos_routes import build_vinculos_router

__all__ = ["build_vinculos_router"]
