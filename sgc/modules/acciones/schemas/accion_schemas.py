# -*- coding: utf-8 -*-
"""
sgc/modules/acciones/schemas/accion_schemas.py

Esquemas Pydantic v2 para acciones de mejora.

`AccionUpdateIn` contiene exactamente los campos editables; cualquier otro
campo del cuerpo (numero_accion, hallazgo_id, is_active...) se ignora.

Autor: Equipo SGC
Fecha: 2026-09-20
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from sgc.shared.utils.base_models import UTF8SafeModel, UTCDateTime
from sgc.modules.acciones.enums import Eficacia, EstadoAccion, Prioridad


class AccionCreateIn(UTF8SafeModel):
    hallazgo_id: UUID
    descripcion_accion: str = Field(..., min_length=1)
    titulo: Optional[str] = Field(None, max_length=200)
    responsable_accion: Optional[str] = Field(None, max_length=200)
    prioridad: Prioridad = Prioridad.MEDIA
    fecha_plan_accion: Optional[UTCDateTime] = None


class AccionUpdateIn(UTF8SafeModel):
    titulo: Optional[str] = Field(None, max_length=200)
    descripcion_accion: Optional[str] = Field(None, min_length=1)
    responsable_accion: Optional[str] = Field(None, max_length=200)
    prioridad: Optional[Prioridad] = None
    estado: Optional[EstadoAccion] = None
    fecha_plan_accion: Optional[UTCDateTime] = None
    fecha_ejecucion: Optional[UTCDateTime] = None
    comentarios_ejecucion: Optional[str] = None
    evidencia_accion: Optional[str] = None
    descripcion_verificacion: Optional[str] = None
    responsable_verificacion: Optional[str] = Field(None, max_length=200)
    fecha_plan_verificacion: Optional[UTCDateTime] = None
    comentarios_verificacion: Optional[str] = None
    fecha_verificacion_finalizada: Optional[UTCDateTime] = None
    resultado_verificacion: Optional[str] = None
    eficacia: Optional[Eficacia] = None
    observaciones: Optional[str] = None


class AccionRead(UTF8SafeModel):
    id: UUID
    organizacion_id: UUID
    numero_accion: str
    hallazgo_id: UUID
    titulo: Optional[str] = None
    descripcion_accion: str
    responsable_accion: Optional[str] = None
    prioridad: Prioridad
    estado: EstadoAccion
    fecha_plan_accion: Optional[UTCDateTime] = None
    fecha_ejecucion: Optional[UTCDateTime] = None
    comentarios_ejecucion: Optional[str] = None
    evidencia_accion: Optional[str] = None
    descripcion_verificacion: Optional[str] = None
    responsable_verificacion: Optional[str] = None
    fecha_plan_verificacion: Optional[UTCDateTime] = None
    comentarios_verificacion: Optional[str] = None
    fecha_verificacion_finalizada: Optional[UTCDateTime] = None
    resultado_verificacion: Optional[str] = None
    eficacia: Eficacia
    observaciones: Optional[str] = None
    is_active: bool
    created_at: UTCDateTime
    updated_at: UTCDateTime


class AccionResponse(UTF8SafeModel):
    success: bool = True
    message: str
    accion: AccionRead


class AccionListResponse(UTF8SafeModel):
    success: bool = True
    items: List[AccionRead]
    total: int


__all__ = [
    "AccionCreateIn",
    "AccionUpdateIn",
    "AccionRead",
    "AccionResponse",
    "AccionListResponse",
]
