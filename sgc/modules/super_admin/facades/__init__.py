# -*- coding: utf-8 -*-
"""
sgc/modules/super_admin/facades/__init__.py
"""

from .errors import *  # noqa: F401,F403
from .errors import __all__  # noqa: F401
