# -*- coding: utf-8 -*-
"""
sgc/modules/auth/services/__init__.py
"""

from .auth_service import AuthService, ensure_super_admin, issue_tokens

__all__ = ["AuthService", "ensure_super_admin", "issue_tokens"]
