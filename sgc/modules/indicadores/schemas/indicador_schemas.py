# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/schemas/indicador_schemas.py

Esquemas Pydantic v2 para indicadores y mediciones.

Las reglas de negocio (orden de umbrales, fechas de periodicidad, rango
de la meta) se validan en el facade para responder 400 con el mensaje de
dominio; aquí solo se validan tipos, requeridos y longitudes.

Autor: Equipo SGC
Fecha: 2026-09-17
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from sgc.shared.utils.base_models import UTF8SafeModel, UTCDateTime
from sgc.shared.utils.text import normalize_codigo
from sgc.modules.indicadores.enums import (
    CategoriaIndicador,
    DireccionTendencia,
    EstadoEvaluacion,
    EstadoIndicador,
    FrecuenciaMedicion,
    TipoIndicador,
    TipoMeta,
)


# ---------------------------------------------------------------------------
# Estructuras anidadas
# ---------------------------------------------------------------------------
class MetaSchema(UTF8SafeModel):
    tipo: TipoMeta
    valor: float
    valor_minimo: Optional[float] = None
    valor_maximo: Optional[float] = None


class UmbralesSchema(UTF8SafeModel):
    critico: float
    advertencia: float
    satisfactorio: float


class PeriodicidadSchema(UTF8SafeModel):
    inicio: UTCDateTime
    fin: Optional[UTCDateTime] = None
    activo: bool = True


class TendenciaSchema(UTF8SafeModel):
    direccion: DireccionTendencia = DireccionTendencia.ESTABLE
    periodo: int = Field(30, ge=1, le=3650)
    valor: float = 0


class AlertasUmbralesSchema(UTF8SafeModel):
    critico: bool = True
    advertencia: bool = True


class AlertasSchema(UTF8SafeModel):
    habilitadas: bool = False
    email: List[str] = Field(default_factory=list)
    umbrales: AlertasUmbralesSchema = Field(default_factory=AlertasUmbralesSchema)


class DocumentosSchema(UTF8SafeModel):
    procedimiento: Optional[str] = None
    instructivo: Optional[str] = None
    formato: Optional[str] = None


# ---------------------------------------------------------------------------
# Entradas
# ---------------------------------------------------------------------------
class IndicadorCreateIn(UTF8SafeModel):
    codigo: str = Field(..., min_length=1, max_length=20)
    nombre: str = Field(..., min_length=1, max_length=200)
    descripcion: Optional[str] = Field(None, max_length=1000)
    tipo: TipoIndicador
    categoria: CategoriaIndicador
    departamento_id: Optional[str] = Field(None, max_length=64)
    proceso_id: Optional[str] = Field(None, max_length=64)
    objetivo_id: Optional[str] = Field(None, max_length=64)
    responsable: str = Field(..., min_length=1, max_length=200)
    unidad: str = Field(..., min_length=1, max_length=50)
    formula: Optional[str] = Field(None, max_length=500)
    frecuencia: FrecuenciaMedicion
    meta: MetaSchema
    umbrales: UmbralesSchema
    fuente_datos: Optional[str] = Field(None, max_length=500)
    metodo_calculo: Optional[str] = Field(None, max_length=1000)
    periodicidad: PeriodicidadSchema
    tendencia: TendenciaSchema = Field(default_factory=TendenciaSchema)
    estado: EstadoIndicador = EstadoIndicador.ACTIVO
    alertas: AlertasSchema = Field(default_factory=AlertasSchema)
    documentos: DocumentosSchema = Field(default_factory=DocumentosSchema)

    @field_validator("codigo")
    @classmethod
    def _normalize_codigo(cls, v: str) -> str:
        return normalize_codigo(v)


class IndicadorUpdateIn(UTF8SafeModel):
    codigo: Optional[str] = Field(None, min_length=1, max_length=20)
    nombre: Optional[str] = Field(None, min_length=1, max_length=200)
    descripcion: Optional[str] = Field(None, max_length=1000)
    tipo: Optional[TipoIndicador] = None
    categoria: Optional[CategoriaIndicador] = None
    departamento_id: Optional[str] = Field(None, max_length=64)
    proceso_id: Optional[str] = Field(None, max_length=64)
    objetivo_id: Optional[str] = Field(None, max_length=64)
    responsable: Optional[str] = Field(None, min_length=1, max_length=200)
    unidad: Optional[str] = Field(None, min_length=1, max_length=50)
    formula: Optional[str] = Field(None, max_length=500)
    frecuencia: Optional[FrecuenciaMedicion] = None
    meta: Optional[MetaSchema] = None
    umbrales: Optional[UmbralesSchema] = None
    fuente_datos: Optional[str] = Field(None, max_length=500)
    metodo_calculo: Optional[str] = Field(None, max_length=1000)
    periodicidad: Optional[PeriodicidadSchema] = None
    tendencia: Optional[TendenciaSchema] = None
    estado: Optional[EstadoIndicador] = None
    alertas: Optional[AlertasSchema] = None
    documentos: Optional[DocumentosSchema] = None

    @field_validator("codigo")
    @classmethod
    def _normalize_codigo(cls, v: Optional[str]) -> Optional[str]:
        return normalize_codigo(v) if v is not None else v


class SuspenderIn(UTF8SafeModel):
    motivo: str = Field(..., min_length=1, max_length=1000)


class MedicionCreateIn(UTF8SafeModel):
    valor: float
    fecha: Optional[UTCDateTime] = None
    observaciones: Optional[str] = Field(None, max_length=1000)


class PuntoMedicion(UTF8SafeModel):
    valor: float
    fecha: UTCDateTime


class TendenciaCalculoIn(UTF8SafeModel):
    """Sin `mediciones` se usan las mediciones registradas del indicador."""
    mediciones: Optional[List[PuntoMedicion]] = None


# ---------------------------------------------------------------------------
# Salidas
# ---------------------------------------------------------------------------
class IndicadorRead(UTF8SafeModel):
    id: UUID
    organizacion_id: UUID
    codigo: str
    nombre: str
    descripcion: Optional[str] = None
    tipo: TipoIndicador
    categoria: CategoriaIndicador
    departamento_id: Optional[str] = None
    proceso_id: Optional[str] = None
    objetivo_id: Optional[str] = None
    responsable: str
    unidad: str
    formula: Optional[str] = None
    frecuencia: FrecuenciaMedicion
    meta: MetaSchema
    umbrales: UmbralesSchema
    fuente_datos: Optional[str] = None
    metodo_calculo: Optional[str] = None
    periodicidad: PeriodicidadSchema
    tendencia: TendenciaSchema
    estado: EstadoIndicador
    motivo_suspension: Optional[str] = None
    alertas: AlertasSchema
    documentos: DocumentosSchema
    is_active: bool
    created_at: UTCDateTime
    updated_at: UTCDateTime


class IndicadorResponse(UTF8SafeModel):
    success: bool = True
    message: str
    indicador: IndicadorRead


class IndicadorListResponse(UTF8SafeModel):
    success: bool = True
    items: List[IndicadorRead]
    total: int


class MedicionRead(UTF8SafeModel):
    id: UUID
    indicador_id: UUID
    valor: float
    fecha: UTCDateTime
    observaciones: Optional[str] = None
    estado: EstadoEvaluacion
    cumple_meta: bool
    registrado_por: Optional[UUID] = None
    created_at: UTCDateTime


class MedicionResponse(UTF8SafeModel):
    success: bool = True
    message: str
    medicion: MedicionRead


class MedicionListResponse(UTF8SafeModel):
    success: bool = True
    items: List[MedicionRead]
    total: int


class EvaluacionRead(UTF8SafeModel):
    valor: float
    estado: EstadoEvaluacion
    cumple_meta: bool


class IndicadorEstadisticas(UTF8SafeModel):
    total: int
    por_tipo: Dict[str, int]
    por_estado: Dict[str, int]
    por_categoria: Dict[str, int]
    activos: int


__all__ = [
    "MetaSchema",
    "UmbralesSchema",
    "PeriodicidadSchema",
    "TendenciaSchema",
    "AlertasSchema",
    "DocumentosSchema",
    "IndicadorCreateIn",
    "IndicadorUpdateIn",
    "SuspenderIn",
    "MedicionCreateIn",
    "PuntoMedicion",
    "TendenciaCalculoIn",
    "IndicadorRead",
    "IndicadorResponse",
    "IndicadorListResponse",
    "MedicionRead",
    "MedicionResponse",
    "MedicionListResponse",
    "EvaluacionRead",
    "IndicadorEstadisticas",
]
