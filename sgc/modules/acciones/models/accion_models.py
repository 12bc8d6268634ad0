# -*- coding: utf-8 -*-
"""
sgc/modules/acciones/models/accion_models.py

Modelo SQLAlchemy de acciones de mejora.

Autor: Equipo SGC
Fecha: 2026-09-20
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from sgc.shared.database.base import Base, as_str_enum
from sgc.shared.database.mixins import TenantMixin
from sgc.modules.acciones.enums import Eficacia, EstadoAccion, Prioridad


class Accion(TenantMixin, Base):
    __tablename__ = "acciones"

    numero_accion: Mapped[str] = mapped_column(String(20), nullable=False)
    hallazgo_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("hallazgos.id", ondelete="CASCADE"), nullable=False, index=True
    )
    titulo: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    descripcion_accion: Mapped[str] = mapped_column(Text, nullable=False)
    responsable_accion: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    prioridad: Mapped[Prioridad] = mapped_column(as_str_enum(Prioridad), nullable=False, default=Prioridad.MEDIA)
    estado: Mapped[EstadoAccion] = mapped_column(
        as_str_enum(EstadoAccion), nullable=False, default=EstadoAccion.P1_PLANIFICACION_ACCION, index=True
    )

    # Ejecución
    fecha_plan_accion: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    fecha_ejecucion: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    comentarios_ejecucion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    evidencia_accion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Verificación
    descripcion_verificacion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    responsable_verificacion: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    fecha_plan_verificacion: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    comentarios_verificacion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    fecha_verificacion_finalizada: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    resultado_verificacion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    eficacia: Mapped[Eficacia] = mapped_column(as_str_enum(Eficacia), nullable=False, default=Eficacia.PENDIENTE)
    observaciones: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint("organizacion_id", "numero_accion", name="uq_acciones_organizacion_numero"),
    )

    def __repr__(self) -> str:
        return f"<Accion id={self.id} numero={self.numero_accion!r} estado={self.estado}>"


__all__ = ["Accion"]
