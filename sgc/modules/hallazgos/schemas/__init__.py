# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/schemas/__init__.py
"""

from .hallazgo_schemas import *  # noqa: F401,F403
from .hallazgo_schemas import __all__  # noqa: F401
