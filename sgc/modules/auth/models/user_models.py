# -*- coding: utf-8 -*-
"""
sgc/modules/auth/models/user_models.py

Modelo de usuarios (AppUser). Cada usuario pertenece a una organización.

Autor: Equipo SGC
Fecha: 2026-09-16
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Uuid, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sgc.shared.database.base import Base, as_str_enum
from sgc.shared.database.mixins import TimestampMixin
from sgc.modules.auth.enums import UserRole
from .organization_models import Organization


class AppUser(TimestampMixin, Base):
    __tablename__ = "app_users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    organization_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        as_str_enum(UserRole, 20), nullable=False, default=UserRole.USER
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, server_default=true(), nullable=False)
    last_login: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    organization: Mapped[Organization] = relationship(
        "Organization", back_populates="users", lazy="joined"
    )

    def __repr__(self) -> str:
        return f"<AppUser id={self.id} email={self.email!r} role={self.role} active={self.is_active}>"


__all__ = ["AppUser"]
