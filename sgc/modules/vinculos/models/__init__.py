# -*- coding: utf-8 -*-
"""
sgc/modules/vinculos/models/__init__.py
"""

from .vinculo_models import DocumentoRelacionado, NormaRelacionada, Participante

__all__ = ["Participante", "DocumentoRelacionado", "NormaRelacionada"]
