# -*- coding: utf-8 -*-
"""
sgc/modules/auth/schemas/auth_schemas.py

Esquemas Pydantic v2 de autenticación, usuarios y organizaciones.

Autor: Equipo SGC
Fecha: 2026-09-16
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from sgc.shared.utils.base_models import UTF8SafeModel
from sgc.modules.auth.enums import OrganizationPlan, UserRole


def _normalize_email(v: str) -> str:
    return v.strip().lower()


# ---------------------------------------------------------------------------
# Entradas
# ---------------------------------------------------------------------------
class RegisterIn(UTF8SafeModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    organization_id: UUID

    @field_validator("email")
    @classmethod
    def _lower_email(cls, v: str) -> str:
        return _normalize_email(v)


class LoginIn(UTF8SafeModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def _lower_email(cls, v: str) -> str:
        return _normalize_email(v)


class RefreshIn(UTF8SafeModel):
    refresh_token: str = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Salidas
# ---------------------------------------------------------------------------
class UserRead(UTF8SafeModel):
    id: UUID
    organization_id: UUID
    name: str
    email: str
    role: UserRole
    is_active: bool
    last_login: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class OrganizationRead(UTF8SafeModel):
    id: UUID
    name: str
    plan: OrganizationPlan
    contact_email: Optional[str] = None
    is_active: bool
    settings: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


class TokenPair(UTF8SafeModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class LoginResponse(UTF8SafeModel):
    success: bool = True
    user: UserRead
    tokens: TokenPair


class UserResponse(UTF8SafeModel):
    success: bool = True
    message: str
    user: UserRead


class VerifyResponse(UTF8SafeModel):
    valid: bool = True
    user: UserRead


class UserListResponse(UTF8SafeModel):
    success: bool = True
    items: List[UserRead]
    total: int


__all__ = [
    "RegisterIn",
    "LoginIn",
    "RefreshIn",
    "UserRead",
    "OrganizationRead",
    "TokenPair",
    "LoginResponse",
    "UserResponse",
    "VerifyResponse",
    "UserListResponse",
]
