# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/models/indicador_models.py

Modelos SQLAlchemy de indicadores y sus mediciones.

Estructuras anidadas (meta, umbrales, tendencia, alertas, documentos) se
guardan como JSON. La periodicidad va en columnas propias porque se filtra
por ella (indicadores activos / que necesitan medición).

Autor: Equipo SGC
Fecha: 2026-09-17
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Index, String, Text, UniqueConstraint, Uuid, true
from sqlalchemy.orm import Mapped, mapped_column

from sgc.shared.database.base import Base, JSONType, as_str_enum
from sgc.shared.database.mixins import TenantMixin
from sgc.modules.indicadores.enums import (
    CategoriaIndicador,
    EstadoEvaluacion,
    EstadoIndicador,
    FrecuenciaMedicion,
    TipoIndicador,
)


class Indicador(TenantMixin, Base):
    __tablename__ = "indicadores"

    codigo: Mapped[str] = mapped_column(String(20), nullable=False)
    nombre: Mapped[str] = mapped_column(String(200), nullable=False)
    descripcion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tipo: Mapped[TipoIndicador] = mapped_column(as_str_enum(TipoIndicador), nullable=False)
    categoria: Mapped[CategoriaIndicador] = mapped_column(as_str_enum(CategoriaIndicador), nullable=False)

    # Referencias opacas a otras entidades del SGC
    departamento_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, index=True)
    proceso_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, index=True)
    objetivo_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, index=True)
    responsable: Mapped[str] = mapped_column(String(200), nullable=False)

    unidad: Mapped[str] = mapped_column(String(50), nullable=False)
    formula: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    frecuencia: Mapped[FrecuenciaMedicion] = mapped_column(as_str_enum(FrecuenciaMedicion), nullable=False)
    fuente_datos: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    metodo_calculo: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # {"tipo", "valor", "valor_minimo", "valor_maximo"}
    meta: Mapped[Dict[str, Any]] = mapped_column(JSONType, nullable=False)
    # {"critico", "advertencia", "satisfactorio"}
    umbrales: Mapped[Dict[str, Any]] = mapped_column(JSONType, nullable=False)
    # {"direccion", "periodo", "valor"}
    tendencia: Mapped[Dict[str, Any]] = mapped_column(JSONType, nullable=False, default=dict)
    # {"habilitadas", "email": [...], "umbrales": {"critico", "advertencia"}}
    alertas: Mapped[Dict[str, Any]] = mapped_column(JSONType, nullable=False, default=dict)
    # {"procedimiento", "instructivo", "formato"}
    documentos: Mapped[Dict[str, Any]] = mapped_column(JSONType, nullable=False, default=dict)

    periodicidad_inicio: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    periodicidad_fin: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    periodicidad_activo: Mapped[bool] = mapped_column(Boolean, default=True, server_default=true(), nullable=False)

    estado: Mapped[EstadoIndicador] = mapped_column(
        as_str_enum(EstadoIndicador), nullable=False, default=EstadoIndicador.ACTIVO, index=True
    )
    motivo_suspension: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint("organizacion_id", "codigo", name="uq_indicadores_organizacion_codigo"),
        Index("ix_indicadores_org_nombre", "organizacion_id", "nombre"),
    )

    @property
    def periodicidad(self) -> Dict[str, Any]:
        return {
            "inicio": self.periodicidad_inicio,
            "fin": self.periodicidad_fin,
            "activo": self.periodicidad_activo,
        }

    def __repr__(self) -> str:
        return f"<Indicador id={self.id} codigo={self.codigo!r} estado={self.estado}>"


class Medicion(TenantMixin, Base):
    __tablename__ = "indicador_mediciones"

    indicador_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("indicadores.id", ondelete="CASCADE"), nullable=False, index=True
    )
    valor: Mapped[float] = mapped_column(Float, nullable=False)
    fecha: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    observaciones: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    estado: Mapped[EstadoEvaluacion] = mapped_column(as_str_enum(EstadoEvaluacion), nullable=False)
    cumple_meta: Mapped[bool] = mapped_column(Boolean, nullable=False)
    registrado_por: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True)

    __table_args__ = (Index("ix_indicador_mediciones_indicador_fecha", "indicador_id", "fecha"),)

    def __repr__(self) -> str:
        return f"<Medicion indicador={self.indicador_id} valor={self.valor} fecha={self.fecha}>"


__all__ = ["Indicador", "Medicion"]
