# -*- coding: utf-8 -*-
"""
sgc/shared/scheduler/jobs/__init__.py

Jobs programados del sistema.
"""

from .registros_alertas_job import refresh_registros_alertas, register_registros_alertas_job

__all__ = [
    "refresh_registros_alertas",
    "register_registros_alertas_job",
]
