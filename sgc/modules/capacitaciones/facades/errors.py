# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/facades/errors.py

Autor: Equipo SGC
Fecha: 2026-09-19
"""


class CapacitacionNotFound(Exception):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__("Capacitación no encontrada")


class TemaNotFound(Exception):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__("Tema no encontrado")


class AsistenteNotFound(Exception):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__("Asistente no encontrado")


class CapacitacionValidationError(Exception):
    def __init__(self, message: str):
        super().__init__(message)


class AsistenteDuplicado(Exception):
    def __init__(self, empleado_id: str):
        self.empleado_id = empleado_id
        super().__init__("El empleado ya está inscrito en esta capacitación")


class CupoCompleto(Exception):
    def __init__(self, cupo_maximo: int):
        self.cupo_maximo = cupo_maximo
        super().__init__(f"La capacitación alcanzó su cupo máximo ({cupo_maximo} asistentes)")


__all__ = [
    "CapacitacionNotFound",
    "TemaNotFound",
    "AsistenteNotFound",
    "CapacitacionValidationError",
    "AsistenteDuplicado",
    "CupoCompleto",
]
