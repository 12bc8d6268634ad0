# -*- coding: utf-8 -*-
"""
sgc/modules/super_admin/routes/__init__.py
"""

from fastapi import APIRouter

from .super_admin_routes import router as super_admin_router


def get_super_admin_router() -> APIRouter:
    router = APIRouter()
    router.include_router(super_admin_router, prefix="/super-admin")
    return router


__all__ = ["get_super_admin_router"]
