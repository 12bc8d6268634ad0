# -*- coding: utf-8 -*-
"""
sgc/modules/minutas/routes/__init__.py

Router principal de minutas (/minutas), con sus participantes,
documentos y normas relacionados.
"""

from fastapi import APIRouter

from sgc.modules.minutas.facades.errors import MinutaNotFound
from sgc.modules.minutas.models import Minuta
from sgc.modules.vinculos.enums import EntidadTipo
from sgc.modules.vinculos.routes import build_vinculos_router

from .minutas_routes import queries_router, router as crud_router


def get_minutas_router() -> APIRouter:
    router = APIRouter(responses={404: {"description": "No encontrado"}})
    router.include_router(queries_router, prefix="/minutas")
    router.include_router(crud_router, prefix="/minutas")
    router.include_router(
        build_vinculos_router(EntidadTipo.MINUTA, Minuta, MinutaNotFound), prefix="/minutas"
    )
    return router


__all__ = ["get_minutas_router"]
