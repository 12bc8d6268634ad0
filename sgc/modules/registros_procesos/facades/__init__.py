# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/facades/__init__.py
"""

from .errors import (
    CodigoRegistroDuplicado,
    RegistroNotFound,
    RegistroValidationError,
    RegistroYaCerrado,
)

__all__ = [
    "CodigoRegistroDuplicado",
    "RegistroNotFound",
    "RegistroValidationError",
    "RegistroYaCerrado",
]
