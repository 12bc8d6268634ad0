# -*- coding: utf-8 -*-
"""
sgc/modules/auditorias/schemas/__init__.py
"""

from .auditoria_schemas import *  # noqa: F401,F403
from .auditoria_schemas import __all__  # noqa: F401
