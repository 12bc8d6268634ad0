# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/facades/errors.py

Excepciones de dominio para registros de procesos.

Autor: Equipo SGC
Fecha: 2026-09-18
"""


class RegistroNotFound(Exception):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"Registro no encontrado: {identifier}")


class CodigoRegistroDuplicado(Exception):
    def __init__(self, codigo: str):
        self.codigo = codigo
        super().__init__(f"Ya existe un registro con el código {codigo} en esta organización")


class RegistroValidationError(Exception):
    """Fechas incoherentes, índice de acción fuera de rango, etc."""
    def __init__(self, message: str):
        super().__init__(message)


class RegistroYaCerrado(Exception):
    """Se intenta cerrar un registro cerrado o cancelado."""
    def __init__(self, estado: str):
        self.estado = estado
        super().__init__(f"El registro ya está en estado {estado} y no puede cerrarse")


__all__ = [
    "RegistroNotFound",
    "CodigoRegistroDuplicado",
    "RegistroValidationError",
    "RegistroYaCerrado",
]
