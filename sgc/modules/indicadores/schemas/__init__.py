# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/schemas/__init__.py
"""

from .indicador_schemas import *  # noqa: F401,F403
from .indicador_schemas import __all__  # noqa: F401
