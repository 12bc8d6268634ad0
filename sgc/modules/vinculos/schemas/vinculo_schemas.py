# -*- coding: utf-8 -*-
"""
sgc/modules/vinculos/schemas/vinculo_schemas.py

Autor: Equipo SGC
Fecha: 2026-10-19
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import Field

from sgc.shared.utils.base_models import UTF8SafeModel, UTCDateTime
from sgc.modules.vinculos.enums import EntidadTipo, NivelCumplimiento


# ---------------------------------------------------------------------------
# Participantes
# ---------------------------------------------------------------------------
class ParticipanteCreateIn(UTF8SafeModel):
    personal_id: str = Field(..., min_length=1, max_length=64)
    rol: str = Field("participante", min_length=1, max_length=50)
    asistio: bool = False
    observaciones: Optional[str] = None
    datos_adicionales: Dict[str, Any] = Field(default_factory=dict)


class ParticipanteRead(UTF8SafeModel):
    id: UUID
    entidad_tipo: EntidadTipo
    entidad_id: UUID
    personal_id: str
    rol: str
    asistio: bool
    observaciones: Optional[str] = None
    datos_adicionales: Dict[str, Any] = Field(default_factory=dict)
    created_at: UTCDateTime


class ParticipanteResponse(UTF8SafeModel):
    success: bool = True
    message: str
    participante: ParticipanteRead


class ParticipanteListResponse(UTF8SafeModel):
    success: bool = True
    items: List[ParticipanteRead]
    total: int


# ---------------------------------------------------------------------------
# Documentos
# ---------------------------------------------------------------------------
class DocumentoCreateIn(UTF8SafeModel):
    documento_id: str = Field(..., min_length=1, max_length=64)
    tipo_relacion: str = Field("adjunto", min_length=1, max_length=50)
    descripcion: Optional[str] = None
    es_obligatorio: bool = False


class DocumentoRead(UTF8SafeModel):
    id: UUID
    entidad_tipo: EntidadTipo
    entidad_id: UUID
    documento_id: str
    tipo_relacion: str
    descripcion: Optional[str] = None
    es_obligatorio: bool
    created_at: UTCDateTime


class DocumentoResponse(UTF8SafeModel):
    success: bool = True
    message: str
    documento: DocumentoRead


class DocumentoListResponse(UTF8SafeModel):
    success: bool = True
    items: List[DocumentoRead]
    total: int


# ---------------------------------------------------------------------------
# Normas
# ---------------------------------------------------------------------------
class NormaCreateIn(UTF8SafeModel):
    norma_id: str = Field(..., min_length=1, max_length=64)
    punto_norma: str = Field(..., min_length=1, max_length=50)
    clausula_descripcion: Optional[str] = None
    tipo_relacion: str = Field("aplica", min_length=1, max_length=50)
    nivel_cumplimiento: NivelCumplimiento = NivelCumplimiento.PENDIENTE
    observaciones: Optional[str] = None


class NormaRead(UTF8SafeModel):
    id: UUID
    entidad_tipo: EntidadTipo
    entidad_id: UUID
    norma_id: str
    punto_norma: str
    clausula_descripcion: Optional[str] = None
    tipo_relacion: str
    nivel_cumplimiento: NivelCumplimiento
    observaciones: Optional[str] = None
    created_at: UTCDateTime


class NormaResponse(UTF8SafeModel):
    success: bool = True
    message: str
    norma: NormaRead


class NormaListResponse(UTF8SafeModel):
    success: bool = True
    items: List[NormaRead]
    total: int


__all__ = [
    "ParticipanteCreateIn",
    "ParticipanteRead",
    "ParticipanteResponse",
    "ParticipanteListResponse",
    "DocumentoCreateIn",
    "DocumentoRead",
    "DocumentoResponse",
    "DocumentoListResponse",
    "NormaCreateIn",
    "NormaRead",
    "NormaResponse",
    "NormaListResponse",
]
