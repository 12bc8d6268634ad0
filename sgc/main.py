# -*- coding: utf-8 -*-
"""
sgc/main.py

Punto de entrada principal del backend SGC.

- Carga .env antes de leer la configuración
- Logging configurado desde settings (plain/pretty/json)
- Ciclo de vida: esquema de base de datos, super admin inicial y scheduler
- CORS, middleware de errores JSON y logging de requests
- Health en /health y API en /api (paquete sgc.routes)

Autor: Equipo SGC
Fecha: 2026-09-23
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que lea la configuración
# En PROD no se sobrescriben las variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().strip('"').strip("'").lower()
load_dotenv(dotenv_path=_ENV_PATH, override=_PYTHON_ENV == "development")

import anyio
import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from sgc.shared.config import get_settings, setup_logging
from sgc.shared.database import init_models, session_scope
from sgc.shared.middleware import JSONExceptionMiddleware, RequestLoggingMiddleware
from sgc.shared.scheduler import get_scheduler
from sgc.shared.scheduler.jobs import register_registros_alertas_job
from sgc.shared.utils.json_response import UTF8JSONResponse

settings = get_settings()
setup_logging(settings.log_level, settings.log_format)

logger = logging.getLogger(__name__)


async def _bootstrap_super_admin() -> None:
    if not settings.super_admin_email or settings.super_admin_password is None:
        logger.info("Super admin inicial no configurado (SUPER_ADMIN_EMAIL/SUPER_ADMIN_PASSWORD)")
        return

    from sgc.modules.auth.services.auth_service import ensure_super_admin

    async with session_scope() as db:
        await ensure_super_admin(
            db,
            email=settings.super_admin_email,
            password=settings.super_admin_password.get_secret_value(),
            name=settings.super_admin_name,
            organization_name=settings.platform_organization_name,
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    if settings.db_create_tables:
        await init_models()

    await _bootstrap_super_admin()

    scheduler = get_scheduler()
    if register_registros_alertas_job(scheduler):
        scheduler.start()
        logger.info("Scheduler iniciado con jobs programados")

    logger.info("Backend %s iniciado (env=%s)", settings.app_name, settings.python_env)
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        with anyio.CancelScope(shield=True):
            scheduler.shutdown(wait=True)
        logger.info("Backend %s apagado", settings.app_name)


openapi_tags = [
    {"name": "auth", "description": "Registro, login, refresh y verificación de tokens"},
    {"name": "indicadores", "description": "Indicadores de calidad y sus mediciones"},
    {"name": "registros-procesos", "description": "Registros de procesos con alertas y seguimiento"},
    {"name": "capacitaciones", "description": "Capacitaciones, temas y asistentes"},
    {"name": "auditorias", "description": "Programa de auditorías, aspectos y relaciones"},
    {"name": "hallazgos", "description": "Hallazgos y su ciclo de tratamiento"},
    {"name": "acciones", "description": "Acciones de mejora vinculadas a hallazgos"},
    {"name": "minutas", "description": "Minutas de reunión y sus vínculos"},
    {"name": "super-admin", "description": "Consola de organizaciones y usuarios"},
]


def _configure_cors(app_instance: FastAPI) -> dict:
    """
    Configura CORS a partir de CORS_ORIGINS.

    "*" con allow_credentials=True es inválido en navegadores; en modo
    comodín se desactivan las credenciales.
    """
    origins = settings.get_cors_origins()
    is_wildcard_only = origins == ["*"]
    cors_config = {
        "allow_origins": origins,
        "allow_credentials": not is_wildcard_only,
        "allow_methods": ["*"],
        "allow_headers": ["*"],
        "max_age": 600,
    }
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    logger.info("CORS configurado: origins=%s credentials=%s", origins, cors_config["allow_credentials"])
    return cors_config


def create_app() -> FastAPI:
    app_instance = FastAPI(
        title=settings.app_name,
        description="API del Sistema de Gestión de Calidad ISO 9001 multi-organización",
        version=settings.app_version,
        lifespan=lifespan,
        openapi_tags=openapi_tags,
        default_response_class=UTF8JSONResponse,
    )

    # El orden real de ejecución de middlewares es inverso al registro:
    # CORS se registra al final para ejecutarse primero
    app_instance.add_middleware(RequestLoggingMiddleware)
    app_instance.add_middleware(JSONExceptionMiddleware)
    _configure_cors(app_instance)

    @app_instance.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return UTF8JSONResponse(
            content={"detail": exc.detail},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    from sgc.routes import router as main_router

    app_instance.include_router(main_router)

    @app_instance.get("/")
    async def root():
        return {"service": settings.app_name, "status": "active"}

    return app_instance


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "sgc.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.is_dev,
    )

# Fin del archivo sgc/main.py
