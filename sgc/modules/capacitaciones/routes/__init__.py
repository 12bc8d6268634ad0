# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/routes/__init__.py

Router principal de capacitaciones (/capacitaciones).
"""

from fastapi import APIRouter

from .capacitaciones_routes import router as capacitaciones_router
from .participantes_routes import router as participantes_router


def get_capacitaciones_router() -> APIRouter:
    router = APIRouter(responses={404: {"description": "No encontrado"}})
    router.include_router(capacitaciones_router, prefix="/capacitaciones")
    router.include_router(participantes_router, prefix="/capacitaciones")
    return router


__all__ = ["get_capacitaciones_router"]
