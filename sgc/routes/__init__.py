# -*- coding: utf-8 -*-
"""
sgc/routes/__init__.py

Ensamblador principal de ruteadores del backend SGC.

- Router de health (/health), sin prefijo.
- Capa /api definida en master_routes.py.

Autor: Equipo SGC
Fecha: 2026-09-23
"""

from fastapi import APIRouter

from .health_routes import router as health_router
from .master_routes import api

router = APIRouter()

router.include_router(health_router)
router.include_router(api)

__all__ = ["router"]

# Fin del archivo sgc/routes/__init__.py
