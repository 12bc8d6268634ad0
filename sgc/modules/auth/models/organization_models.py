# -*- coding: utf-8 -*-
"""
sgc/modules/auth/models/organization_models.py

Organización: el tenant. Su id es la clave multi-organización presente en
todas las tablas de negocio.

Autor: Equipo SGC
Fecha: 2026-09-16
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import Boolean, String, Uuid, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sgc.shared.database.base import Base, JSONType, as_str_enum
from sgc.shared.database.mixins import TimestampMixin
from sgc.modules.auth.enums import OrganizationPlan

if TYPE_CHECKING:
    from .user_models import AppUser


class Organization(TimestampMixin, Base):
    __tablename__ = "organizations"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    plan: Mapped[OrganizationPlan] = mapped_column(
        as_str_enum(OrganizationPlan, 20),
        nullable=False,
        default=OrganizationPlan.BASIC,
    )
    contact_email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, server_default=true(), nullable=False)

    # {"max_users": int, "features": [str, ...]}
    settings: Mapped[Dict[str, Any]] = mapped_column(JSONType, nullable=False, default=dict)

    users: Mapped[List["AppUser"]] = relationship(
        "AppUser", back_populates="organization", lazy="raise"
    )

    def __repr__(self) -> str:
        return f"<Organization id={self.id} name={self.name!r} plan={self.plan}>"


__all__ = ["Organization"]
