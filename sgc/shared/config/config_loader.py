# -*- coding: utf-8 -*-
"""
sgc/shared/config/config_loader.py

Selección de la clase de settings por PYTHON_ENV y singleton cacheado.

Un PYTHON_ENV desconocido cae en desarrollo con un warning; producción
siempre pasa por `_security_checks` antes de servir.

Autor: Equipo SGC
Fecha: 2026-09-14
"""

from functools import lru_cache
import logging
import os
from typing import Dict, Optional, Type

from .settings_base import BaseAppSettings
from .settings_dev import DevSettings
from .settings_testing import EnvTestingSettings
from .settings_prod import ProdSettings

logger = logging.getLogger(__name__)

SETTINGS_BY_ENV: Dict[str, Type[BaseAppSettings]] = {
    "development": DevSettings,
    "test": EnvTestingSettings,
    "production": ProdSettings,
}


def settings_class_for(env: Optional[str]) -> Type[BaseAppSettings]:
    name = (env or "development").strip().lower()
    settings_cls = SETTINGS_BY_ENV.get(name)
    if settings_cls is None:
        logger.warning("PYTHON_ENV=%r no reconocido; se usa configuración de desarrollo", env)
        return DevSettings
    return settings_cls


@lru_cache(maxsize=1)
def get_settings() -> BaseAppSettings:
    """
    Instancia (una sola vez) los settings del entorno actual.

    Raises:
        ValueError: si las validaciones de seguridad fallan
    """
    settings = settings_class_for(os.getenv("PYTHON_ENV"))()
    settings._security_checks()
    return settings


__all__ = ["SETTINGS_BY_ENV", "settings_class_for", "get_settings"]
# Fin del archivo sgc/shared/config/config_loader.py
