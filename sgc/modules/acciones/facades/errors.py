# -*- coding: utf-8 -*-
"""
sgc/modules/acciones/facades/errors.py

Autor: Equipo SGC
Fecha: 2026-09-20
"""


class AccionNotFound(Exception):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__("Acción no encontrada.")


class HallazgoInexistente(Exception):
    """El hallazgo indicado no existe en la organización (404)."""

    def __init__(self, hallazgo_id):
        self.hallazgo_id = hallazgo_id
        super().__init__("Hallazgo no encontrado")


class SinCamposActualizables(Exception):
    def __init__(self):
        super().__init__("No hay campos válidos para actualizar.")


class NumeroAccionDuplicado(Exception):
    def __init__(self, numero: str):
        self.numero = numero
        super().__init__(f"El número de acción {numero} ya está asignado; reintente la operación")


__all__ = ["AccionNotFound", "HallazgoInexistente", "SinCamposActualizables", "NumeroAccionDuplicado"]
