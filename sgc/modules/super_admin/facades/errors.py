# -*- coding: utf-8 -*-
"""
sgc/modules/super_admin/facades/errors.py

Las excepciones de organizaciones y usuarios se reutilizan de
sgc.modules.auth.facades.errors; aquí solo viven las propias de la consola.

Autor: Equipo SGC
Fecha: 2026-09-22
"""


class OperacionNoPermitida(Exception):
    """Operación de consola que comprometería el acceso de la plataforma (400)."""


__all__ = ["OperacionNoPermitida"]
