# -*- coding: utf-8 -*-
"""
sgc/modules/auditorias/facades/errors.py

Autor: Equipo SGC
Fecha: 2026-09-19
"""


class AuditoriaNotFound(Exception):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__("Auditoría no encontrada")


class AspectoNotFound(Exception):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__("Aspecto no encontrado")


class RelacionNotFound(Exception):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__("Relación no encontrada")


class CodigoAuditoriaDuplicado(Exception):
    def __init__(self, codigo: str):
        self.codigo = codigo
        super().__init__(f"Ya existe una auditoría con el código {codigo} en esta organización")


class RelacionDuplicada(Exception):
    def __init__(self, destino_tipo: str, destino_id: str):
        super().__init__("Esta relación ya existe")


__all__ = [
    "AuditoriaNotFound",
    "AspectoNotFound",
    "RelacionNotFound",
    "CodigoAuditoriaDuplicado",
    "RelacionDuplicada",
]
