# -*- coding: utf-8 -*-
"""
sgc/modules/vinculos/models/vinculo_models.py

Tablas de vínculos compartidas por varias entidades.

`entidad_tipo` + `entidad_id` identifican la minuta u hallazgo dueño; no
hay FK porque la tabla destino depende de `entidad_tipo`. El servicio
valida que la entidad exista en la organización antes de vincular.

Autor: Equipo SGC
Fecha: 2026-10-19
"""

from __future__ import annotations

from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy import Boolean, Index, String, Text, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column

from sgc.shared.database.base import Base, JSONType, as_str_enum
from sgc.shared.database.mixins import TenantMixin
from sgc.modules.vinculos.enums import EntidadTipo, NivelCumplimiento


class Participante(TenantMixin, Base):
    __tablename__ = "sgc_participantes"

    entidad_tipo: Mapped[EntidadTipo] = mapped_column(as_str_enum(EntidadTipo), nullable=False)
    entidad_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    personal_id: Mapped[str] = mapped_column(String(64), nullable=False)
    rol: Mapped[str] = mapped_column(String(50), nullable=False, default="participante")
    asistio: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    observaciones: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    datos_adicionales: Mapped[Dict[str, Any]] = mapped_column(JSONType, nullable=False, default=dict)

    __table_args__ = (Index("ix_sgc_participantes_entidad", "entidad_tipo", "entidad_id"),)


class DocumentoRelacionado(TenantMixin, Base):
    __tablename__ = "sgc_documentos_relacionados"

    entidad_tipo: Mapped[EntidadTipo] = mapped_column(as_str_enum(EntidadTipo), nullable=False)
    entidad_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    documento_id: Mapped[str] = mapped_column(String(64), nullable=False)
    tipo_relacion: Mapped[str] = mapped_column(String(50), nullable=False, default="adjunto")
    descripcion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    es_obligatorio: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    __table_args__ = (Index("ix_sgc_documentos_relacionados_entidad", "entidad_tipo", "entidad_id"),)


class NormaRelacionada(TenantMixin, Base):
    __tablename__ = "sgc_normas_relacionadas"

    entidad_tipo: Mapped[EntidadTipo] = mapped_column(as_str_enum(EntidadTipo), nullable=False)
    entidad_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    norma_id: Mapped[str] = mapped_column(String(64), nullable=False)
    punto_norma: Mapped[str] = mapped_column(String(50), nullable=False)
    clausula_descripcion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tipo_relacion: Mapped[str] = mapped_column(String(50), nullable=False, default="aplica")
    nivel_cumplimiento: Mapped[NivelCumplimiento] = mapped_column(
        as_str_enum(NivelCumplimiento), nullable=False, default=NivelCumplimiento.PENDIENTE
    )
    observaciones: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (Index("ix_sgc_normas_relacionadas_entidad", "entidad_tipo", "entidad_id"),)


__all__ = ["Participante", "DocumentoRelacionado", "NormaRelacionada"]
