# -*- coding: utf-8 -*-
"""
sgc/modules/super_admin/schemas/super_admin_schemas.py

Esquemas de la consola de super admin.

Autor: Equipo SGC
Fecha: 2026-09-22
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import EmailStr, Field

from sgc.shared.utils.base_models import UTF8SafeModel
from sgc.modules.auth.enums import OrganizationPlan, UserRole
from sgc.modules.auth.schemas import OrganizationRead, UserRead


class OrganizationStats(UTF8SafeModel):
    total_users: int = 0
    active_users: int = 0


class OrganizationWithStats(OrganizationRead):
    stats: OrganizationStats = Field(default_factory=OrganizationStats)


class OrganizationCreateIn(UTF8SafeModel):
    name: str = Field(..., min_length=1, max_length=200)
    plan: OrganizationPlan = OrganizationPlan.BASIC
    contact_email: Optional[EmailStr] = None
    admin_email: EmailStr
    admin_name: str = Field(..., min_length=1, max_length=255)
    admin_password: str = Field(..., min_length=8, max_length=128)


class OrganizationUpdateIn(UTF8SafeModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    plan: Optional[OrganizationPlan] = None
    contact_email: Optional[EmailStr] = None
    is_active: Optional[bool] = None


class OrganizationResponse(UTF8SafeModel):
    success: bool = True
    message: str
    organization: OrganizationWithStats


class OrganizationCreatedResponse(OrganizationResponse):
    admin_user: UserRead


class OrganizationListResponse(UTF8SafeModel):
    success: bool = True
    items: List[OrganizationWithStats]
    total: int


class OrganizationUsersResponse(UTF8SafeModel):
    success: bool = True
    organization_id: UUID
    items: List[UserRead]
    total: int


class UserRoleIn(UTF8SafeModel):
    # Se valida en el servicio para responder 400 "Rol inválido"
    role: str = Field(..., min_length=1, max_length=20)


class UserStatusIn(UTF8SafeModel):
    is_active: bool


class RecentActivity(UTF8SafeModel):
    user_id: UUID
    name: str
    email: str
    role: UserRole
    organization_id: UUID
    organization_name: Optional[str] = None
    created_at: datetime


class DashboardRead(UTF8SafeModel):
    success: bool = True
    total_organizations: int
    active_organizations: int
    total_users: int
    active_users: int
    organizations_by_plan: Dict[str, int]
    recent_activity: List[RecentActivity]


__all__ = [
    "OrganizationStats",
    "OrganizationWithStats",
    "OrganizationCreateIn",
    "OrganizationUpdateIn",
    "OrganizationResponse",
    "OrganizationCreatedResponse",
    "OrganizationListResponse",
    "OrganizationUsersResponse",
    "UserRoleIn",
    "UserStatusIn",
    "RecentActivity",
    "DashboardRead",
]
