# -*- coding: utf-8 -*-
"""
sgc/modules/minutas/models/minuta_models.py

Autor: Equipo SGC
Fecha: 2026-09-21
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sgc.shared.database.base import Base
from sgc.shared.database.mixins import TenantMixin


class Minuta(TenantMixin, Base):
    __tablename__ = "minutas"

    titulo: Mapped[str] = mapped_column(String(200), nullable=False)
    responsable: Mapped[Optional[str]] = mapped_column(String(200), nullable=True, index=True)
    descripcion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    fecha: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    lugar: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    agenda: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    acuerdos: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Minuta id={self.id} titulo={self.titulo!r}>"


__all__ = ["Minuta"]
