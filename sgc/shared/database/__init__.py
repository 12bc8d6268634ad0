# -*- coding: utf-8 -*-
"""
sgc/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.
"""

from __future__ import annotations

from .base import Base, NAMING_CONVENTION, JSONType, as_str_enum
from .repository import TenantRepository
from .transactions import commit_or_raise
from .numbering import next_numero, orden_numerico
from .database import (
    engine,
    SessionLocal,
    build_engine,
    get_db,
    session_scope,
    init_models,
    check_database_health,
)

__all__ = [
    "Base",
    "NAMING_CONVENTION",
    "JSONType",
    "as_str_enum",
    "TenantRepository",
    "commit_or_raise",
    "next_numero",
    "orden_numerico",
    "engine",
    "SessionLocal",
    "build_engine",
    "get_db",
    "session_scope",
    "init_models",
    "check_database_health",
]
