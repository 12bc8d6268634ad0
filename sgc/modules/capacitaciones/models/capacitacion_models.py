# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/models/capacitacion_models.py

Modelos SQLAlchemy de capacitaciones, temas y asistentes.

Autor: Equipo SGC
Fecha: 2026-09-19
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Index, Integer, String, Text, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column

from sgc.shared.database.base import Base, as_str_enum
from sgc.shared.database.mixins import TenantMixin
from sgc.shared.utils.dates import now_utc
from sgc.modules.capacitaciones.enums import (
    EstadoAsistente,
    EstadoCapacitacion,
    ModalidadCapacitacion,
)


class Capacitacion(TenantMixin, Base):
    __tablename__ = "capacitaciones"

    nombre: Mapped[str] = mapped_column(String(200), nullable=False)
    descripcion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    instructor: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    fecha_inicio: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    fecha_fin: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    duracion_horas: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    modalidad: Mapped[ModalidadCapacitacion] = mapped_column(
        as_str_enum(ModalidadCapacitacion), nullable=False, default=ModalidadCapacitacion.PRESENCIAL
    )
    estado: Mapped[EstadoCapacitacion] = mapped_column(
        as_str_enum(EstadoCapacitacion), nullable=False, default=EstadoCapacitacion.PROGRAMADA, index=True
    )
    ubicacion: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    costo: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    cupo_maximo: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    requisitos: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    objetivos: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    contenido: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    metodologia: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    evaluacion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    certificacion: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self) -> str:
        return f"<Capacitacion id={self.id} nombre={self.nombre!r} estado={self.estado}>"


class CapacitacionTema(TenantMixin, Base):
    __tablename__ = "capacitacion_temas"

    capacitacion_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("capacitaciones.id", ondelete="CASCADE"), nullable=False, index=True
    )
    titulo: Mapped[str] = mapped_column(String(200), nullable=False)
    descripcion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    orden: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class CapacitacionAsistente(TenantMixin, Base):
    __tablename__ = "capacitacion_asistentes"

    capacitacion_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("capacitaciones.id", ondelete="CASCADE"), nullable=False, index=True
    )
    empleado_id: Mapped[str] = mapped_column(String(64), nullable=False)
    estado: Mapped[EstadoAsistente] = mapped_column(
        as_str_enum(EstadoAsistente), nullable=False, default=EstadoAsistente.INSCRITO
    )
    fecha_inscripcion: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=now_utc)
    calificacion: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    observaciones: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("ix_capacitacion_asistentes_capacitacion_empleado", "capacitacion_id", "empleado_id"),
    )


__all__ = ["Capacitacion", "CapacitacionTema", "CapacitacionAsistente"]
