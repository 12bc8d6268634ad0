# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/routes/__init__.py

Router principal de registros de procesos (/registros-procesos).
Las consultas con segmentos fijos van antes que /{registro_id}.
"""

from fastapi import APIRouter

from .registros_crud import router as crud_router
from .registros_queries import router as queries_router


def get_registros_procesos_router() -> APIRouter:
    router = APIRouter(responses={404: {"description": "No encontrado"}})
    router.include_router(queries_router, prefix="/registros-procesos")
    router.include_router(crud_router, prefix="/registros-procesos")
    return router


__all__ = ["get_registros_procesos_router"]
