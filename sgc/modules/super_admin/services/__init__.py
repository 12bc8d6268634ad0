# -*- coding: utf-8 -*-
"""
sgc/modules/super_admin/services/__init__.py
"""

from .super_admin_service import SuperAdminService

__all__ = ["SuperAdminService"]
