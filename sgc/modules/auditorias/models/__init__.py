# -*- coding: utf-8 -*-
"""
sgc/modules/auditorias/models/__init__.py
"""

from .auditoria_models import Auditoria, AuditoriaAspecto, AuditoriaRelacion

__all__ = ["Auditoria", "AuditoriaAspecto", "AuditoriaRelacion"]
