# -*- coding: utf-8 -*-
"""
sgc/shared/config/settings_dev.py

Overrides para entorno de DESARROLLO usando Pydantic v2.
Hereda de BaseAppSettings y ajusta únicamente valores del ambiente local.

Autor: Equipo SGC
Fecha: 2026-09-14
"""

from .settings_base import BaseAppSettings


class DevSettings(BaseAppSettings):
    """Configuración para entorno de desarrollo."""

    python_env: str = "development"

    # Logging legible en consola
    log_level: str = "DEBUG"
    log_format: str = "plain"


__all__ = ["DevSettings"]
# Fin del archivo sgc/shared/config/settings_dev.py
