# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/schemas/registro_schemas.py

Esquemas Pydantic v2 para registros de procesos.

Autor: Equipo SGC
Fecha: 2026-09-18
"""

from __future__ import annotations

from typing import Dict, List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from sgc.shared.enums import Prioridad
from sgc.shared.utils.base_models import UTF8SafeModel, UTCDateTime
from sgc.shared.utils.text import normalize_codigo
from sgc.modules.registros_procesos.enums import (
    CategoriaRegistro,
    EstadoAccion,
    EstadoRegistro,
    NivelImpacto,
    ResultadoCierre,
    TipoAlerta,
    TipoOrigen,
    TipoRegistro,
)


# ---------------------------------------------------------------------------
# Estructuras anidadas
# ---------------------------------------------------------------------------
class OrigenSchema(UTF8SafeModel):
    tipo: TipoOrigen
    fuente: str = Field(..., min_length=1, max_length=100)
    referencia: Optional[str] = Field(None, max_length=100)


class ImpactoSchema(UTF8SafeModel):
    nivel: NivelImpacto = NivelImpacto.MEDIO
    descripcion: str = Field(..., min_length=1, max_length=500)
    areas_afectadas: List[str] = Field(default_factory=list)


class CausasSchema(UTF8SafeModel):
    identificadas: List[str] = Field(default_factory=list)
    raiz: Optional[str] = Field(None, max_length=500)
    analisis: Optional[str] = Field(None, max_length=1000)


class AccionRegistroSchema(UTF8SafeModel):
    descripcion: str = Field(..., min_length=1, max_length=500)
    responsable: str = Field(..., min_length=1, max_length=200)
    fecha_inicio: UTCDateTime
    fecha_fin: UTCDateTime
    estado: EstadoAccion = EstadoAccion.PENDIENTE
    evidencia: List[str] = Field(default_factory=list)


class SeguimientoSchema(UTF8SafeModel):
    fecha: UTCDateTime
    responsable: str
    comentarios: str
    progreso: int
    evidencia: List[str] = Field(default_factory=list)


class CierreSchema(UTF8SafeModel):
    fecha: Optional[UTCDateTime] = None
    responsable: Optional[str] = None
    resultado: Optional[ResultadoCierre] = None
    comentarios: Optional[str] = None
    evidencia: List[str] = Field(default_factory=list)
    lecciones_aprendidas: List[str] = Field(default_factory=list)


class DocumentosRegistroSchema(UTF8SafeModel):
    evidencia: List[str] = Field(default_factory=list)
    informes: List[str] = Field(default_factory=list)
    certificados: List[str] = Field(default_factory=list)
    otros: List[str] = Field(default_factory=list)


class AlertasRegistroSchema(UTF8SafeModel):
    generadas: bool = False
    tipo: Optional[TipoAlerta] = None
    mensaje: Optional[str] = None
    enviada: bool = False


class RelacionadoConSchema(UTF8SafeModel):
    registros: List[str] = Field(default_factory=list)
    objetivos: List[str] = Field(default_factory=list)
    indicadores: List[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Entradas
# ---------------------------------------------------------------------------
class RegistroCreateIn(UTF8SafeModel):
    codigo: str = Field(..., min_length=1, max_length=30)
    tipo: TipoRegistro
    proceso_id: str = Field(..., min_length=1, max_length=64)
    departamento_id: Optional[str] = Field(None, max_length=64)
    responsable: str = Field(..., min_length=1, max_length=200)
    fecha: Optional[UTCDateTime] = None
    fecha_vencimiento: Optional[UTCDateTime] = None
    titulo: str = Field(..., min_length=1, max_length=200)
    descripcion: str = Field(..., min_length=1, max_length=2000)
    estado: EstadoRegistro = EstadoRegistro.ABIERTO
    prioridad: Prioridad = Prioridad.MEDIA
    categoria: CategoriaRegistro = CategoriaRegistro.CALIDAD
    origen: OrigenSchema
    impacto: ImpactoSchema
    causas: CausasSchema = Field(default_factory=CausasSchema)
    acciones: List[AccionRegistroSchema] = Field(default_factory=list)
    documentos: DocumentosRegistroSchema = Field(default_factory=DocumentosRegistroSchema)
    relacionado_con: RelacionadoConSchema = Field(default_factory=RelacionadoConSchema)

    @field_validator("codigo")
    @classmethod
    def _normalize_codigo(cls, v: str) -> str:
        return normalize_codigo(v)


class RegistroUpdateIn(UTF8SafeModel):
    codigo: Optional[str] = Field(None, min_length=1, max_length=30)
    tipo: Optional[TipoRegistro] = None
    proceso_id: Optional[str] = Field(None, min_length=1, max_length=64)
    departamento_id: Optional[str] = Field(None, max_length=64)
    responsable: Optional[str] = Field(None, min_length=1, max_length=200)
    fecha: Optional[UTCDateTime] = None
    fecha_vencimiento: Optional[UTCDateTime] = None
    titulo: Optional[str] = Field(None, min_length=1, max_length=200)
    descripcion: Optional[str] = Field(None, min_length=1, max_length=2000)
    estado: Optional[EstadoRegistro] = None
    prioridad: Optional[Prioridad] = None
    categoria: Optional[CategoriaRegistro] = None
    origen: Optional[OrigenSchema] = None
    impacto: Optional[ImpactoSchema] = None
    causas: Optional[CausasSchema] = None
    acciones: Optional[List[AccionRegistroSchema]] = None
    documentos: Optional[DocumentosRegistroSchema] = None
    relacionado_con: Optional[RelacionadoConSchema] = None

    @field_validator("codigo")
    @classmethod
    def _normalize_codigo(cls, v: Optional[str]) -> Optional[str]:
        return normalize_codigo(v) if v is not None else v


class CerrarRegistroIn(UTF8SafeModel):
    responsable: str = Field(..., min_length=1, max_length=200)
    resultado: ResultadoCierre
    comentarios: str = Field(..., min_length=1, max_length=1000)
    evidencia: List[str] = Field(default_factory=list)
    lecciones_aprendidas: List[str] = Field(default_factory=list)


class SeguimientoIn(UTF8SafeModel):
    responsable: str = Field(..., min_length=1, max_length=200)
    comentarios: str = Field(..., min_length=1, max_length=1000)
    # El rango 0..100 se valida en el servicio (400)
    progreso: int
    evidencia: List[str] = Field(default_factory=list)


class AccionUpdateIn(UTF8SafeModel):
    descripcion: Optional[str] = Field(None, min_length=1, max_length=500)
    responsable: Optional[str] = Field(None, min_length=1, max_length=200)
    fecha_inicio: Optional[UTCDateTime] = None
    fecha_fin: Optional[UTCDateTime] = None
    estado: Optional[EstadoAccion] = None
    evidencia: Optional[List[str]] = None


# ---------------------------------------------------------------------------
# Salidas
# ---------------------------------------------------------------------------
class RegistroRead(UTF8SafeModel):
    id: UUID
    organizacion_id: UUID
    codigo: str
    tipo: TipoRegistro
    proceso_id: str
    departamento_id: Optional[str] = None
    responsable: str
    fecha: UTCDateTime
    fecha_vencimiento: Optional[UTCDateTime] = None
    titulo: str
    descripcion: str
    estado: EstadoRegistro
    prioridad: Prioridad
    categoria: CategoriaRegistro
    origen: OrigenSchema
    impacto: ImpactoSchema
    causas: CausasSchema
    acciones: List[AccionRegistroSchema]
    seguimiento: List[SeguimientoSchema]
    cierre: Optional[CierreSchema] = None
    documentos: DocumentosRegistroSchema
    alertas: AlertasRegistroSchema
    relacionado_con: RelacionadoConSchema
    is_active: bool
    created_at: UTCDateTime
    updated_at: UTCDateTime


class RegistroResponse(UTF8SafeModel):
    success: bool = True
    message: str
    registro: RegistroRead


class RegistroListResponse(UTF8SafeModel):
    success: bool = True
    items: List[RegistroRead]
    total: int


class ProgresoRead(UTF8SafeModel):
    progreso_general: int
    dias_restantes: Optional[int] = None
    esta_vencido: bool
    necesita_atencion: bool


class RegistroEstadisticas(UTF8SafeModel):
    total: int
    por_tipo: Dict[str, int]
    por_estado: Dict[str, int]
    por_prioridad: Dict[str, int]
    por_categoria: Dict[str, int]
    vencidos: int
    con_alertas: int


__all__ = [
    "OrigenSchema",
    "ImpactoSchema",
    "CausasSchema",
    "AccionRegistroSchema",
    "SeguimientoSchema",
    "CierreSchema",
    "DocumentosRegistroSchema",
    "AlertasRegistroSchema",
    "RelacionadoConSchema",
    "RegistroCreateIn",
    "RegistroUpdateIn",
    "CerrarRegistroIn",
    "SeguimientoIn",
    "AccionUpdateIn",
    "RegistroRead",
    "RegistroResponse",
    "RegistroListResponse",
    "ProgresoRead",
    "RegistroEstadisticas",
]
