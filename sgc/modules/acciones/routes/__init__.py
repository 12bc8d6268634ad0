# -*- coding: utf-8 -*-
"""
sgc/modules/acciones/routes/__init__.py

Router de acciones (/acciones) y de acciones por hallazgo
(/hallazgos/{id}/acciones).
"""

from fastapi import APIRouter

from .acciones_routes import hallazgo_router, router as acciones_router


def get_acciones_router() -> APIRouter:
    router = APIRouter(responses={404: {"description": "No encontrado"}})
    router.include_router(acciones_router, prefix="/acciones")
    router.include_router(hallazgo_router, prefix="/hallazgos")
    return router


__all__ = ["get_acciones_router"]
