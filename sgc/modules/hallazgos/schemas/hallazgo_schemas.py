# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/schemas/hallazgo_schemas.py

Esquemas Pydantic v2 para hallazgos.

Autor: Equipo SGC
Fecha: 2026-09-20
"""

from __future__ import annotations

from typing import Dict, List, Optional
from uuid import UUID

from pydantic import Field

from sgc.shared.utils.base_models import UTF8SafeModel, UTCDateTime
from sgc.modules.hallazgos.enums import (
    CategoriaHallazgo,
    EstadoHallazgo,
    OrigenHallazgo,
    Prioridad,
)


class HallazgoCreateIn(UTF8SafeModel):
    titulo: str = Field(..., min_length=1, max_length=200)
    descripcion: str = Field(..., min_length=1)
    origen: Optional[OrigenHallazgo] = None
    categoria: Optional[CategoriaHallazgo] = None
    punto_norma_afectado: Optional[str] = Field(None, max_length=50)
    requisito_incumplido: Optional[str] = None
    prioridad: Prioridad = Prioridad.MEDIA
    severidad: Prioridad = Prioridad.MEDIA
    responsable_id: Optional[str] = Field(None, max_length=64)
    auditor_id: Optional[str] = Field(None, max_length=64)
    auditoria_id: Optional[str] = Field(None, max_length=64)
    fecha_deteccion: Optional[UTCDateTime] = None


class HallazgoUpdateIn(UTF8SafeModel):
    """El estado no se edita aquí: usar PUT /{id}/estado."""

    titulo: Optional[str] = Field(None, min_length=1, max_length=200)
    descripcion: Optional[str] = Field(None, min_length=1)
    origen: Optional[OrigenHallazgo] = None
    categoria: Optional[CategoriaHallazgo] = None
    punto_norma_afectado: Optional[str] = Field(None, max_length=50)
    requisito_incumplido: Optional[str] = None
    prioridad: Optional[Prioridad] = None
    severidad: Optional[Prioridad] = None
    responsable_id: Optional[str] = Field(None, max_length=64)
    auditor_id: Optional[str] = Field(None, max_length=64)
    auditoria_id: Optional[str] = Field(None, max_length=64)
    accion_inmediata: Optional[str] = None
    causa_raiz: Optional[str] = None
    plan_accion: Optional[str] = None
    evidencia_cierre: Optional[str] = None
    verificacion_eficacia: Optional[str] = None
    fecha_planificacion: Optional[UTCDateTime] = None
    fecha_ejecucion: Optional[UTCDateTime] = None
    fecha_verificacion: Optional[UTCDateTime] = None


class CambioEstadoIn(UTF8SafeModel):
    estado: EstadoHallazgo
    observaciones: Optional[str] = None


class HallazgoRead(UTF8SafeModel):
    id: UUID
    organizacion_id: UUID
    numero_hallazgo: str
    titulo: str
    descripcion: str
    origen: Optional[OrigenHallazgo] = None
    categoria: Optional[CategoriaHallazgo] = None
    punto_norma_afectado: Optional[str] = None
    requisito_incumplido: Optional[str] = None
    prioridad: Prioridad
    severidad: Prioridad
    responsable_id: Optional[str] = None
    auditor_id: Optional[str] = None
    auditoria_id: Optional[str] = None
    estado: EstadoHallazgo
    accion_inmediata: Optional[str] = None
    causa_raiz: Optional[str] = None
    plan_accion: Optional[str] = None
    evidencia_cierre: Optional[str] = None
    verificacion_eficacia: Optional[str] = None
    fecha_deteccion: UTCDateTime
    fecha_planificacion: Optional[UTCDateTime] = None
    fecha_ejecucion: Optional[UTCDateTime] = None
    fecha_verificacion: Optional[UTCDateTime] = None
    fecha_cierre: Optional[UTCDateTime] = None
    is_active: bool
    created_at: UTCDateTime
    updated_at: UTCDateTime


class HallazgoResponse(UTF8SafeModel):
    success: bool = True
    message: str
    hallazgo: HallazgoRead


class HallazgoListResponse(UTF8SafeModel):
    success: bool = True
    items: List[HallazgoRead]
    total: int


class Paginacion(UTF8SafeModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class HallazgoSearchResponse(UTF8SafeModel):
    success: bool = True
    items: List[HallazgoRead]
    pagination: Paginacion


class HallazgoEstadisticas(UTF8SafeModel):
    total: int
    en_deteccion: int
    en_tratamiento: int
    en_verificacion: int
    cerrados: int
    por_prioridad: Dict[str, int]
    por_categoria: Dict[str, int]
    por_origen: Dict[str, int]


__all__ = [
    "HallazgoCreateIn",
    "HallazgoUpdateIn",
    "CambioEstadoIn",
    "HallazgoRead",
    "HallazgoResponse",
    "HallazgoListResponse",
    "Paginacion",
    "HallazgoSearchResponse",
    "HallazgoEstadisticas",
]
