# -*- coding: utf-8 -*-
"""
sgc/modules/auditorias/schemas/auditoria_schemas.py

Esquemas Pydantic v2 para auditorías, aspectos y relaciones.

Autor: Equipo SGC
Fecha: 2026-09-19
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from sgc.shared.utils.base_models import UTF8SafeModel, UTCDateTime
from sgc.shared.utils.text import normalize_codigo
from sgc.modules.auditorias.enums import Conformidad, EstadoAuditoria


# ---------------------------------------------------------------------------
# Aspectos y relaciones
# ---------------------------------------------------------------------------
class AspectoIn(UTF8SafeModel):
    proceso_id: Optional[str] = Field(None, max_length=64)
    proceso_nombre: Optional[str] = Field(None, max_length=200)
    documentacion_referenciada: Optional[str] = None
    auditor_nombre: Optional[str] = Field(None, max_length=200)
    observaciones: Optional[str] = None
    conformidad: Optional[Conformidad] = None


class AspectoRead(AspectoIn):
    id: UUID
    auditoria_id: UUID
    created_at: UTCDateTime
    updated_at: UTCDateTime


class AspectoResponse(UTF8SafeModel):
    success: bool = True
    message: str
    aspecto: AspectoRead


class AspectoListResponse(UTF8SafeModel):
    success: bool = True
    items: List[AspectoRead]
    total: int


class RelacionIn(UTF8SafeModel):
    destino_tipo: str = Field(..., min_length=1, max_length=50)
    destino_id: str = Field(..., min_length=1, max_length=64)
    descripcion: Optional[str] = None


class RelacionRead(RelacionIn):
    id: UUID
    auditoria_id: UUID
    created_at: UTCDateTime


class RelacionResponse(UTF8SafeModel):
    success: bool = True
    message: str
    relacion: RelacionRead


class RelacionListResponse(UTF8SafeModel):
    success: bool = True
    items: List[RelacionRead]
    total: int


# ---------------------------------------------------------------------------
# Auditoría
# ---------------------------------------------------------------------------
class AuditoriaCreateIn(UTF8SafeModel):
    codigo: Optional[str] = Field(None, min_length=1, max_length=30)
    titulo: str = Field(..., min_length=1, max_length=200)
    areas: List[str] = Field(..., min_length=1)
    responsable_id: Optional[str] = Field(None, max_length=64)
    fecha_programada: UTCDateTime
    objetivos: str = Field(..., min_length=1)
    alcance: Optional[str] = None
    criterios: Optional[str] = None
    estado: EstadoAuditoria = EstadoAuditoria.PLANIFICADA
    aspectos: List[AspectoIn] = Field(default_factory=list)
    relaciones: List[RelacionIn] = Field(default_factory=list)

    @field_validator("codigo")
    @classmethod
    def _normalize_codigo(cls, v: Optional[str]) -> Optional[str]:
        return normalize_codigo(v) if v else None


class AuditoriaUpdateIn(UTF8SafeModel):
    codigo: Optional[str] = Field(None, min_length=1, max_length=30)
    titulo: Optional[str] = Field(None, min_length=1, max_length=200)
    areas: Optional[List[str]] = Field(None, min_length=1)
    responsable_id: Optional[str] = Field(None, max_length=64)
    fecha_programada: Optional[UTCDateTime] = None
    objetivos: Optional[str] = Field(None, min_length=1)
    alcance: Optional[str] = None
    criterios: Optional[str] = None
    estado: Optional[EstadoAuditoria] = None

    @field_validator("codigo")
    @classmethod
    def _normalize_codigo(cls, v: Optional[str]) -> Optional[str]:
        return normalize_codigo(v) if v is not None else v


class AuditoriaRead(UTF8SafeModel):
    id: UUID
    organizacion_id: UUID
    codigo: str
    titulo: str
    areas: List[str]
    responsable_id: Optional[str] = None
    fecha_programada: UTCDateTime
    objetivos: str
    alcance: Optional[str] = None
    criterios: Optional[str] = None
    estado: EstadoAuditoria
    is_active: bool
    created_at: UTCDateTime
    updated_at: UTCDateTime


class AuditoriaDetalleRead(AuditoriaRead):
    aspectos: List[AspectoRead] = Field(default_factory=list)
    relaciones: List[RelacionRead] = Field(default_factory=list)


class AuditoriaResponse(UTF8SafeModel):
    success: bool = True
    message: str
    auditoria: AuditoriaDetalleRead


class AuditoriaListResponse(UTF8SafeModel):
    success: bool = True
    items: List[AuditoriaRead]
    total: int


__all__ = [
    "AspectoIn",
    "AspectoRead",
    "AspectoResponse",
    "AspectoListResponse",
    "RelacionIn",
    "RelacionRead",
    "RelacionResponse",
    "RelacionListResponse",
    "AuditoriaCreateIn",
    "AuditoriaUpdateIn",
    "AuditoriaRead",
    "AuditoriaDetalleRead",
    "AuditoriaResponse",
    "AuditoriaListResponse",
]
