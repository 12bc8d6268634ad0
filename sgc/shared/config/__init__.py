# -*- coding: utf-8 -*-
"""
sgc/shared/config/__init__.py

Punto único de acceso a la configuración:
    from sgc.shared.config import get_settings
"""

from .config_loader import get_settings
from .logging_config import setup_logging
from .settings_base import BaseAppSettings

__all__ = ["get_settings", "setup_logging", "BaseAppSettings"]
