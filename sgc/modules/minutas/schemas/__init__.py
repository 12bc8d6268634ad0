# -*- coding: utf-8 -*-
"""
sgc/modules/minutas/schemas/__init__.py
"""

from .minuta_schemas import *  # noqa: F401,F403
from .minuta_schemas import __all__  # noqa: F401
