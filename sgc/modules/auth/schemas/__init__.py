# -*- coding: utf-8 -*-
"""
sgc/modules/auth/schemas/__init__.py
"""

from .auth_schemas import (
    LoginIn,
    LoginResponse,
    OrganizationRead,
    RefreshIn,
    RegisterIn,
    TokenPair,
    UserListResponse,
    UserRead,
    UserResponse,
    VerifyResponse,
)

__all__ = [
    "LoginIn",
    "LoginResponse",
    "OrganizationRead",
    "RefreshIn",
    "RegisterIn",
    "TokenPair",
    "UserListResponse",
    "UserRead",
    "UserResponse",
    "VerifyResponse",
]
