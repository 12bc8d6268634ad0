# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/models/hallazgo_models.py

Modelo SQLAlchemy de hallazgos.

Autor: Equipo SGC
Fecha: 2026-09-20
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from sgc.shared.database.base import Base, as_str_enum
from sgc.shared.database.mixins import TenantMixin
from sgc.shared.utils.dates import now_utc
from sgc.modules.hallazgos.enums import (
    CategoriaHallazgo,
    EstadoHallazgo,
    OrigenHallazgo,
    Prioridad,
)


class Hallazgo(TenantMixin, Base):
    __tablename__ = "hallazgos"

    numero_hallazgo: Mapped[str] = mapped_column(String(30), nullable=False)
    titulo: Mapped[str] = mapped_column(String(200), nullable=False)
    descripcion: Mapped[str] = mapped_column(Text, nullable=False)
    origen: Mapped[Optional[OrigenHallazgo]] = mapped_column(as_str_enum(OrigenHallazgo), nullable=True, index=True)
    categoria: Mapped[Optional[CategoriaHallazgo]] = mapped_column(
        as_str_enum(CategoriaHallazgo), nullable=True, index=True
    )
    punto_norma_afectado: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    requisito_incumplido: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    prioridad: Mapped[Prioridad] = mapped_column(
        as_str_enum(Prioridad), nullable=False, default=Prioridad.MEDIA, index=True
    )
    severidad: Mapped[Prioridad] = mapped_column(as_str_enum(Prioridad), nullable=False, default=Prioridad.MEDIA)
    responsable_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    auditor_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    auditoria_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    estado: Mapped[EstadoHallazgo] = mapped_column(
        as_str_enum(EstadoHallazgo), nullable=False, default=EstadoHallazgo.DETECCION, index=True
    )

    # Tratamiento
    accion_inmediata: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    causa_raiz: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    plan_accion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    evidencia_cierre: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    verificacion_eficacia: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    fecha_deteccion: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=now_utc)
    fecha_planificacion: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    fecha_ejecucion: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    fecha_verificacion: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    fecha_cierre: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        UniqueConstraint("organizacion_id", "numero_hallazgo", name="uq_hallazgos_organizacion_numero"),
    )

    def __repr__(self) -> str:
        return f"<Hallazgo id={self.id} numero={self.numero_hallazgo!r} estado={self.estado}>"


__all__ = ["Hallazgo"]
