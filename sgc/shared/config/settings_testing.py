# -*- coding: utf-8 -*-
"""
sgc/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Determinista: logging moderado, SQLite en memoria y scheduler apagado.

Autor: Equipo SGC
Fecha: 2026-09-14
"""

from typing import Optional

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    python_env: str = "test"

    # --- Logging en test: menos ruido ---
    log_level: str = "WARNING"
    log_format: str = "pretty"

    # --- Base de datos aislada (los tests montan su propio engine) ---
    db_url: Optional[str] = "sqlite+aiosqlite:///:memory:"

    # --- Sin jobs en segundo plano durante pruebas ---
    scheduler_enabled: bool = False

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo sgc/shared/config/settings_testing.py
