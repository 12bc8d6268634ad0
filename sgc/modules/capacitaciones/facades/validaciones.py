# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/facades/validaciones.py

Reglas de negocio de capacitaciones.
"""

from datetime import datetime
from typing import Optional

from sgc.shared.utils.dates import as_utc
from sgc.modules.capacitaciones.facades.errors import CapacitacionValidationError


def validar_fechas(fecha_inicio: datetime, fecha_fin: Optional[datetime]) -> None:
    if fecha_fin is not None and as_utc(fecha_fin) < as_utc(fecha_inicio):
        raise CapacitacionValidationError(
            "La fecha de fin debe ser posterior o igual a la fecha de inicio"
        )


__all__ = ["validar_fechas"]
