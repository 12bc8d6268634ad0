# -*- coding: utf-8 -*-
"""
sgc/shared/config/settings_prod.py

Overrides para entorno de PRODUCCIÓN usando Pydantic v2.
Lee solo variables de entorno / secret stores, logging INFO en JSON
y TLS hacia la base de datos.

Autor: Equipo SGC
Fecha: 2026-09-14
"""

from typing import Literal

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class ProdSettings(BaseAppSettings):
    python_env: Literal["development", "test", "production"] = "production"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "pretty", "plain"] = "json"

    db_ssl: bool = True

    # El esquema se gestiona con migraciones en producción
    db_create_tables: bool = False

    model_config = SettingsConfigDict(
        env_file=None,  # No leemos .env en producción
        extra="ignore",
    )


__all__ = ["ProdSettings"]
# Fin del archivo sgc/shared/config/settings_prod.py
