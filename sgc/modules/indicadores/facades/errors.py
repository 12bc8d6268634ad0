# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/facades/errors.py

Excepciones de dominio para el módulo de indicadores.

Autor: Equipo SGC
Fecha: 2026-09-17
"""


class IndicadorNotFound(Exception):
    """Se lanza cuando no se encuentra un indicador activo en la organización."""
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"Indicador no encontrado: {identifier}")


class CodigoIndicadorDuplicado(Exception):
    def __init__(self, codigo: str):
        self.codigo = codigo
        super().__init__(f"Ya existe un indicador con el código {codigo} en esta organización")


class IndicadorValidationError(Exception):
    """Regla de negocio incumplida (umbrales, periodicidad, meta)."""
    def __init__(self, message: str):
        super().__init__(message)


class MedicionesInsuficientes(IndicadorValidationError):
    def __init__(self):
        super().__init__("Se necesitan al menos 2 mediciones para calcular la tendencia")


__all__ = [
    "IndicadorNotFound",
    "CodigoIndicadorDuplicado",
    "IndicadorValidationError",
    "MedicionesInsuficientes",
]
