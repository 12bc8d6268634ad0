# -*- coding: utf-8 -*-
"""
sgc/modules/vinculos/schemas/__init__.py
"""

from .vinculo_schemas import *  # noqa: F401,F403
from .vinculo_schemas import __all__  # noqa: F401
