# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/routes/__init__.py

Router principal del módulo de indicadores (/indicadores).

Orden de ensamblado:
  1. Consultas (segmentos fijos: /activos, /estadisticas, /tipo/{tipo}...)
  2. CRUD, estado, mediciones y tendencia (/{indicador_id})
"""

from fastapi import APIRouter

from .indicadores_crud import router as crud_router
from .indicadores_queries import router as queries_router


def get_indicadores_router() -> APIRouter:
    router = APIRouter(responses={404: {"description": "No encontrado"}})
    # El prefijo va en cada include: las rutas raíz tienen path vacío
    router.include_router(queries_router, prefix="/indicadores")
    router.include_router(crud_router, prefix="/indicadores")
    return router


__all__ = ["get_indicadores_router"]
