# -*- coding: utf-8 -*-
"""
sgc

Backend del Sistema de Gestión de Calidad (ISO 9001) multi-organización.
"""

__version__ = "1.0.0"
