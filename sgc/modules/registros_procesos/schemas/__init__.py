# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/schemas/__init__.py
"""

from .registro_schemas import *  # noqa: F401,F403
from .registro_schemas import __all__  # noqa: F401
