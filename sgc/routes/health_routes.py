# -*- coding: utf-8 -*-
"""
sgc/routes/health_routes.py

Endpoint básico de health check del backend SGC.

Autor: Equipo SGC
Fecha: 2026-09-23
"""

from fastapi import APIRouter

from sgc.shared.config import get_settings
from sgc.shared.database import check_database_health
from sgc.shared.scheduler import get_scheduler
from sgc.shared.utils.dates import now_utc

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check del backend",
    description="Estado del backend: conectividad a la base de datos y jobs programados.",
)
async def health_check() -> dict:
    settings = get_settings()

    db_ok = await check_database_health(timeout_s=2.0)
    scheduler = get_scheduler()

    return {
        "status": "ok" if db_ok else "degraded",
        "timestamp": now_utc().isoformat(),
        "environment": settings.python_env,
        "database": {
            "reachable": db_ok,
        },
        "scheduler": {
            "running": scheduler.is_running,
            "jobs": scheduler.get_jobs(),
        },
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
    }

# Fin del archivo sgc/routes/health_routes.py
