# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/schemas/capacitacion_schemas.py

Esquemas Pydantic v2 para capacitaciones, temas y asistentes.

Autor: Equipo SGC
Fecha: 2026-09-19
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from sgc.shared.utils.base_models import UTF8SafeModel, UTCDateTime
from sgc.modules.capacitaciones.enums import (
    EstadoAsistente,
    EstadoCapacitacion,
    ModalidadCapacitacion,
)


# ---------------------------------------------------------------------------
# Capacitación
# ---------------------------------------------------------------------------
class CapacitacionCreateIn(UTF8SafeModel):
    nombre: str = Field(..., min_length=1, max_length=200)
    descripcion: Optional[str] = None
    instructor: Optional[str] = Field(None, max_length=200)
    fecha_inicio: UTCDateTime
    fecha_fin: Optional[UTCDateTime] = None
    duracion_horas: Optional[float] = Field(None, ge=0)
    modalidad: ModalidadCapacitacion = ModalidadCapacitacion.PRESENCIAL
    estado: EstadoCapacitacion = EstadoCapacitacion.PROGRAMADA
    ubicacion: Optional[str] = Field(None, max_length=300)
    costo: Optional[float] = Field(None, ge=0)
    cupo_maximo: Optional[int] = Field(None, ge=1)
    requisitos: Optional[str] = None
    objetivos: Optional[str] = None
    contenido: Optional[str] = None
    metodologia: Optional[str] = None
    evaluacion: Optional[str] = None
    certificacion: bool = False


class CapacitacionUpdateIn(UTF8SafeModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=200)
    descripcion: Optional[str] = None
    instructor: Optional[str] = Field(None, max_length=200)
    fecha_inicio: Optional[UTCDateTime] = None
    fecha_fin: Optional[UTCDateTime] = None
    duracion_horas: Optional[float] = Field(None, ge=0)
    modalidad: Optional[ModalidadCapacitacion] = None
    estado: Optional[EstadoCapacitacion] = None
    ubicacion: Optional[str] = Field(None, max_length=300)
    costo: Optional[float] = Field(None, ge=0)
    cupo_maximo: Optional[int] = Field(None, ge=1)
    requisitos: Optional[str] = None
    objetivos: Optional[str] = None
    contenido: Optional[str] = None
    metodologia: Optional[str] = None
    evaluacion: Optional[str] = None
    certificacion: Optional[bool] = None


class CapacitacionRead(UTF8SafeModel):
    id: UUID
    organizacion_id: UUID
    nombre: str
    descripcion: Optional[str] = None
    instructor: Optional[str] = None
    fecha_inicio: UTCDateTime
    fecha_fin: Optional[UTCDateTime] = None
    duracion_horas: Optional[float] = None
    modalidad: ModalidadCapacitacion
    estado: EstadoCapacitacion
    ubicacion: Optional[str] = None
    costo: Optional[float] = None
    cupo_maximo: Optional[int] = None
    requisitos: Optional[str] = None
    objetivos: Optional[str] = None
    contenido: Optional[str] = None
    metodologia: Optional[str] = None
    evaluacion: Optional[str] = None
    certificacion: bool
    is_active: bool
    created_at: UTCDateTime
    updated_at: UTCDateTime


class CapacitacionResponse(UTF8SafeModel):
    success: bool = True
    message: str
    capacitacion: CapacitacionRead


class CapacitacionListResponse(UTF8SafeModel):
    success: bool = True
    items: List[CapacitacionRead]
    total: int


# ---------------------------------------------------------------------------
# Temas
# ---------------------------------------------------------------------------
class TemaCreateIn(UTF8SafeModel):
    titulo: str = Field(..., min_length=1, max_length=200)
    descripcion: Optional[str] = None
    orden: Optional[int] = Field(None, ge=0)


class TemaUpdateIn(UTF8SafeModel):
    titulo: Optional[str] = Field(None, min_length=1, max_length=200)
    descripcion: Optional[str] = None
    orden: Optional[int] = Field(None, ge=0)


class TemaRead(UTF8SafeModel):
    id: UUID
    capacitacion_id: UUID
    titulo: str
    descripcion: Optional[str] = None
    orden: int
    created_at: UTCDateTime


class TemaResponse(UTF8SafeModel):
    success: bool = True
    message: str
    tema: TemaRead


class TemaListResponse(UTF8SafeModel):
    success: bool = True
    items: List[TemaRead]
    total: int


# ---------------------------------------------------------------------------
# Asistentes
# ---------------------------------------------------------------------------
class AsistenteCreateIn(UTF8SafeModel):
    empleado_id: str = Field(..., min_length=1, max_length=64)
    estado: EstadoAsistente = EstadoAsistente.INSCRITO
    calificacion: Optional[float] = Field(None, ge=0, le=100)
    observaciones: Optional[str] = None


class AsistenteUpdateIn(UTF8SafeModel):
    estado: Optional[EstadoAsistente] = None
    calificacion: Optional[float] = Field(None, ge=0, le=100)
    observaciones: Optional[str] = None


class AsistenteRead(UTF8SafeModel):
    id: UUID
    capacitacion_id: UUID
    empleado_id: str
    estado: EstadoAsistente
    fecha_inscripcion: UTCDateTime
    calificacion: Optional[float] = None
    observaciones: Optional[str] = None


class AsistenteResponse(UTF8SafeModel):
    success: bool = True
    message: str
    asistente: AsistenteRead


class AsistenteListResponse(UTF8SafeModel):
    success: bool = True
    items: List[AsistenteRead]
    total: int


__all__ = [
    "CapacitacionCreateIn",
    "CapacitacionUpdateIn",
    "CapacitacionRead",
    "CapacitacionResponse",
    "CapacitacionListResponse",
    "TemaCreateIn",
    "TemaUpdateIn",
    "TemaRead",
    "TemaResponse",
    "TemaListResponse",
    "AsistenteCreateIn",
    "AsistenteUpdateIn",
    "AsistenteRead",
    "AsistenteResponse",
    "AsistenteListResponse",
]
