# -*- coding: utf-8 -*-
"""
sgc/shared/utils/base_models.py

Modelo base para los esquemas Pydantic del SGC.

Incluye:
- Eliminación automática de espacios en campos de texto (`str_strip_whitespace`)
- Modo de atributos activado para leer directamente modelos ORM (`from_attributes`)

Autor: Equipo SGC
Fecha: 2026-09-15
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict

from sgc.shared.utils.dates import as_utc


class UTF8SafeModel(BaseModel):
    """Base común de esquemas de entrada y salida."""
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


# Fechas de entrada normalizadas a UTC (las naive se asumen UTC)
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]


__all__ = ["UTF8SafeModel", "UTCDateTime"]
# Fin del archivo sgc/shared/utils/base_models.py
