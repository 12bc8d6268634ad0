# -*- coding: utf-8 -*-
"""
sgc/modules/auth/routes/__init__.py

Router principal del módulo Auth (/auth).
"""

from fastapi import APIRouter

from .auth_routes import router as auth_router


def get_auth_router() -> APIRouter:
    router = APIRouter(prefix="/auth")
    router.include_router(auth_router)
    return router


__all__ = ["get_auth_router"]
