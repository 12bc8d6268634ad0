# -*- coding: utf-8 -*-
"""
sgc/modules/vinculos/facades/errors.py

Autor: Equipo SGC
Fecha: 2026-10-19
"""


class VinculoNotFound(Exception):
    mensaje = "Vínculo no encontrado"

    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(self.mensaje)


class ParticipanteNotFound(VinculoNotFound):
    mensaje = "Participante no encontrado"


class DocumentoNotFound(VinculoNotFound):
    mensaje = "Documento no encontrado"


class NormaNotFound(VinculoNotFound):
    mensaje = "Norma no encontrada"


__all__ = ["VinculoNotFound", "ParticipanteNotFound", "DocumentoNotFound", "NormaNotFound"]
