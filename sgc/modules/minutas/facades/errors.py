# -*- coding: utf-8 -*-
"""
sgc/modules/minutas/facades/errors.py

Autor: Equipo SGC
Fecha: 2026-09-21
"""


class MinutaNotFound(Exception):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__("Minuta no encontrada")


class MinutaValidationError(Exception):
    """Reglas de negocio no cubiertas por el esquema (400)."""


__all__ = ["MinutaNotFound", "MinutaValidationError"]
