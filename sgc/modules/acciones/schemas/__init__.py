# -*- coding: utf-8 -*-
"""
sgc/modules/acciones/schemas/__init__.py
"""

from .accion_schemas import *  # noqa: F401,F403
from .accion_schemas import __all__  # noqa: F401
