# -*- coding: utf-8 -*-
"""
sgc/modules/auditorias/models/auditoria_models.py

Modelos SQLAlchemy de auditorías, sus aspectos y sus relaciones.

Autor: Equipo SGC
Fecha: 2026-09-19
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from sgc.shared.database.base import Base, JSONType, as_str_enum
from sgc.shared.database.mixins import TenantMixin
from sgc.modules.auditorias.enums import Conformidad, EstadoAuditoria


class Auditoria(TenantMixin, Base):
    __tablename__ = "auditorias"

    codigo: Mapped[str] = mapped_column(String(30), nullable=False)
    titulo: Mapped[str] = mapped_column(String(200), nullable=False)
    areas: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=list)
    responsable_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    fecha_programada: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    objetivos: Mapped[str] = mapped_column(Text, nullable=False)
    alcance: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    criterios: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    estado: Mapped[EstadoAuditoria] = mapped_column(
        as_str_enum(EstadoAuditoria), nullable=False, default=EstadoAuditoria.PLANIFICADA, index=True
    )

    __table_args__ = (
        UniqueConstraint("organizacion_id", "codigo", name="uq_auditorias_organizacion_codigo"),
    )

    def __repr__(self) -> str:
        return f"<Auditoria id={self.id} codigo={self.codigo!r} estado={self.estado}>"


class AuditoriaAspecto(TenantMixin, Base):
    __tablename__ = "auditoria_aspectos"

    auditoria_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("auditorias.id", ondelete="CASCADE"), nullable=False, index=True
    )
    proceso_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    proceso_nombre: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    documentacion_referenciada: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    auditor_nombre: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    observaciones: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    conformidad: Mapped[Optional[Conformidad]] = mapped_column(as_str_enum(Conformidad), nullable=True)


class AuditoriaRelacion(TenantMixin, Base):
    __tablename__ = "auditoria_relaciones"

    auditoria_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("auditorias.id", ondelete="CASCADE"), nullable=False, index=True
    )
    destino_tipo: Mapped[str] = mapped_column(String(50), nullable=False)
    destino_id: Mapped[str] = mapped_column(String(64), nullable=False)
    descripcion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


__all__ = ["Auditoria", "AuditoriaAspecto", "AuditoriaRelacion"]
