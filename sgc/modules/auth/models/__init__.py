# -*- coding: utf-8 -*-
"""
sgc/modules/auth/models/__init__.py
"""

from .organization_models import Organization
from .user_models import AppUser

__all__ = ["Organization", "AppUser"]
