# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/schemas/__init__.py
"""

from .capacitacion_schemas import *  # noqa: F401,F403
from .capacitacion_schemas import __all__  # noqa: F401
