# -*- coding: utf-8 -*-
"""
sgc/modules/auditorias/services/__init__.py
"""

from .auditoria_service import AuditoriasService

__all__ = ["AuditoriasService"]
