# -*- coding: utf-8 -*-
"""
sgc/shared/database/mixins.py

Columnas comunes de las entidades del SGC.

- TimestampMixin: created_at / updated_at (UTC).
- TenantMixin: id UUID, organizacion_id (clave multi-organización),
  is_active (borrado lógico) + timestamps.

Los defaults se calculan en Python para que los valores queden cargados
en la instancia tras el flush (sin refresh implícito en AsyncSession).

Autor: Equipo SGC
Fecha: 2026-09-15
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime, ForeignKey, Uuid, func, true
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from sgc.shared.utils.dates import now_utc


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=now_utc, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=now_utc,
        onupdate=now_utc,
        server_default=func.now(),
        nullable=False,
    )


class TenantMixin(TimestampMixin):
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    is_active: Mapped[bool] = mapped_column(
        Boolean, default=True, server_default=true(), nullable=False, index=True
    )

    @declared_attr
    def organizacion_id(cls) -> Mapped[UUID]:
        return mapped_column(
            Uuid,
            ForeignKey("organizations.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )


__all__ = ["TimestampMixin", "TenantMixin"]
# Fin del archivo sgc/shared/database/mixins.py
