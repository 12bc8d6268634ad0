# -*- coding: utf-8 -*-
"""
sgc/modules/minutas/schemas/minuta_schemas.py

Autor: Equipo SGC
Fecha: 2026-09-21
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from sgc.shared.utils.base_models import UTF8SafeModel, UTCDateTime


class MinutaCreateIn(UTF8SafeModel):
    titulo: str = Field(..., min_length=1, max_length=200)
    responsable: Optional[str] = Field(None, max_length=200)
    descripcion: Optional[str] = None
    fecha: Optional[UTCDateTime] = None
    lugar: Optional[str] = Field(None, max_length=200)
    agenda: Optional[str] = None
    acuerdos: Optional[str] = None


class MinutaUpdateIn(UTF8SafeModel):
    titulo: Optional[str] = Field(None, min_length=1, max_length=200)
    responsable: Optional[str] = Field(None, max_length=200)
    descripcion: Optional[str] = None
    fecha: Optional[UTCDateTime] = None
    lugar: Optional[str] = Field(None, max_length=200)
    agenda: Optional[str] = None
    acuerdos: Optional[str] = None


class MinutaRead(UTF8SafeModel):
    id: UUID
    organizacion_id: UUID
    titulo: str
    responsable: Optional[str] = None
    descripcion: Optional[str] = None
    fecha: Optional[UTCDateTime] = None
    lugar: Optional[str] = None
    agenda: Optional[str] = None
    acuerdos: Optional[str] = None
    is_active: bool
    created_at: UTCDateTime
    updated_at: UTCDateTime


class MinutaResponse(UTF8SafeModel):
    success: bool = True
    message: str
    minuta: MinutaRead


class MinutaListResponse(UTF8SafeModel):
    success: bool = True
    items: List[MinutaRead]
    total: int


class MinutaEstadisticas(UTF8SafeModel):
    total: int
    participantes: int
    documentos: int
    normas: int
    este_mes: int


__all__ = [
    "MinutaCreateIn",
    "MinutaUpdateIn",
    "MinutaRead",
    "MinutaResponse",
    "MinutaListResponse",
    "MinutaEstadisticas",
]
