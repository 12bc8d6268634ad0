# -*- coding: utf-8 -*-
"""
sgc/modules/super_admin/schemas/__init__.py
"""

from .super_admin_schemas import *  # noqa: F401,F403
from .super_admin_schemas import __all__  # noqa: F401
