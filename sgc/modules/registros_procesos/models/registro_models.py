# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/models/registro_models.py

Modelo SQLAlchemy de registros de procesos.

Las partes con forma de documento (origen, impacto, causas, acciones,
seguimiento, cierre, documentos, alertas, relacionado_con) se guardan como
JSON; las columnas por las que se filtra u ordena son columnas propias.

Autor: Equipo SGC
Fecha: 2026-09-18
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import DateTime, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from sgc.shared.database.base import Base, JSONType, as_str_enum
from sgc.shared.database.mixins import TenantMixin
from sgc.shared.enums import Prioridad
from sgc.shared.utils.dates import now_utc
from sgc.modules.registros_procesos.enums import (
    CategoriaRegistro,
    EstadoRegistro,
    TipoRegistro,
)


class RegistroProceso(TenantMixin, Base):
    __tablename__ = "registros_procesos"

    codigo: Mapped[str] = mapped_column(String(30), nullable=False)
    tipo: Mapped[TipoRegistro] = mapped_column(as_str_enum(TipoRegistro), nullable=False, index=True)
    proceso_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    departamento_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, index=True)
    responsable: Mapped[str] = mapped_column(String(200), nullable=False, index=True)

    fecha: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=now_utc, index=True)
    fecha_vencimiento: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    titulo: Mapped[str] = mapped_column(String(200), nullable=False)
    descripcion: Mapped[str] = mapped_column(Text, nullable=False)

    estado: Mapped[EstadoRegistro] = mapped_column(
        as_str_enum(EstadoRegistro), nullable=False, default=EstadoRegistro.ABIERTO, index=True
    )
    prioridad: Mapped[Prioridad] = mapped_column(
        as_str_enum(Prioridad), nullable=False, default=Prioridad.MEDIA, index=True
    )
    categoria: Mapped[CategoriaRegistro] = mapped_column(
        as_str_enum(CategoriaRegistro), nullable=False, default=CategoriaRegistro.CALIDAD
    )

    # {"tipo", "fuente", "referencia"}
    origen: Mapped[Dict[str, Any]] = mapped_column(JSONType, nullable=False)
    # {"nivel", "descripcion", "areas_afectadas": [...]}
    impacto: Mapped[Dict[str, Any]] = mapped_column(JSONType, nullable=False)
    # {"identificadas": [...], "raiz", "analisis"}
    causas: Mapped[Dict[str, Any]] = mapped_column(JSONType, nullable=False, default=dict)
    # [{"descripcion", "responsable", "fecha_inicio", "fecha_fin", "estado", "evidencia": [...]}]
    acciones: Mapped[List[Dict[str, Any]]] = mapped_column(JSONType, nullable=False, default=list)
    # [{"fecha", "responsable", "comentarios", "progreso", "evidencia": [...]}]
    seguimiento: Mapped[List[Dict[str, Any]]] = mapped_column(JSONType, nullable=False, default=list)
    cierre: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSONType, nullable=True)
    # {"evidencia", "informes", "certificados", "otros"}
    documentos: Mapped[Dict[str, Any]] = mapped_column(JSONType, nullable=False, default=dict)
    # {"generadas", "tipo", "mensaje", "enviada"}
    alertas: Mapped[Dict[str, Any]] = mapped_column(JSONType, nullable=False, default=dict)
    # {"registros", "objetivos", "indicadores"}
    relacionado_con: Mapped[Dict[str, Any]] = mapped_column(JSONType, nullable=False, default=dict)

    __table_args__ = (
        UniqueConstraint("organizacion_id", "codigo", name="uq_registros_procesos_organizacion_codigo"),
        Index("ix_registros_procesos_org_estado_prioridad", "organizacion_id", "estado", "prioridad"),
    )

    def __repr__(self) -> str:
        return f"<RegistroProceso id={self.id} codigo={self.codigo!r} estado={self.estado}>"


__all__ = ["RegistroProceso"]
