# -*- coding: utf-8 -*-
"""
sgc/modules/auditorias/routes/__init__.py

Router principal de auditorías (/auditorias).
"""

from fastapi import APIRouter

from .auditorias_routes import router as auditorias_router


def get_auditorias_router() -> APIRouter:
    router = APIRouter(responses={404: {"description": "No encontrado"}})
    router.include_router(auditorias_router, prefix="/auditorias")
    return router


__all__ = ["get_auditorias_router"]
