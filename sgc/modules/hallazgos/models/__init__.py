# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/models/__init__.py
"""

from .hallazgo_models import Hallazgo

__all__ = ["Hallazgo"]
