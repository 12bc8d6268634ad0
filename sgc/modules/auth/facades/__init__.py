# -*- coding: utf-8 -*-
"""
sgc/modules/auth/facades/__init__.py
"""

from .errors import (
    InvalidCredentials,
    InvalidRole,
    InvalidToken,
    OrganizationAlreadyExists,
    OrganizationNotFound,
    UserAlreadyExists,
    UserLimitReached,
    UserNotFound,
)
from .plans import build_plan_settings, get_features_by_plan

__all__ = [
    "InvalidCredentials",
    "InvalidRole",
    "InvalidToken",
    "OrganizationAlreadyExists",
    "OrganizationNotFound",
    "UserAlreadyExists",
    "UserLimitReached",
    "UserNotFound",
    "build_plan_settings",
    "get_features_by_plan",
]
