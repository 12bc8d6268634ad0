# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/facades/errors.py

Autor: Equipo SGC
Fecha: 2026-09-20
"""


class HallazgoNotFound(Exception):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__("Hallazgo no encontrado")


class TransicionInvalida(Exception):
    def __init__(self, actual: str, nuevo: str):
        self.actual = actual
        self.nuevo = nuevo
        super().__init__(f"Transición de estado no permitida: {actual} → {nuevo}")


class HallazgoValidationError(Exception):
    """Reglas de negocio no cubiertas por el esquema (400)."""


class NumeroHallazgoDuplicado(Exception):
    def __init__(self, numero: str):
        self.numero = numero
        super().__init__(f"El número de hallazgo {numero} ya está asignado; reintente la operación")


__all__ = [
    "HallazgoNotFound",
    "TransicionInvalida",
    "HallazgoValidationError",
    "NumeroHallazgoDuplicado",
]
