# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/routes/__init__.py

Router principal de hallazgos (/hallazgos), con sus participantes,
documentos y normas relacionados.

Las rutas fijas (/search, /recent, /stats) se registran antes que /{id}.
"""

from fastapi import APIRouter

from sgc.modules.hallazgos.facades.errors import HallazgoNotFound
from sgc.modules.hallazgos.models import Hallazgo
from sgc.modules.vinculos.enums import EntidadTipo
from sgc.modules.vinculos.routes import build_vinculos_router

from .hallazgos_crud import router as crud_router
from .hallazgos_queries import router as queries_router


def get_hallazgos_router() -> APIRouter:
    router = APIRouter(responses={404: {"description": "No encontrado"}})
    router.include_router(queries_router, prefix="/hallazgos")
    router.include_router(crud_router, prefix="/hallazgos")
    router.include_router(
        build_vinculos_router(EntidadTipo.HALLAZGO, Hallazgo, HallazgoNotFound), prefix="/hallazgos"
    )
    return router


__all__ = ["get_hallazgos_router"]
