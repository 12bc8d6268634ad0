# -*- coding: utf-8 -*-
"""
sgc/shared/database/database.py

SQLAlchemy async (asyncpg en producción, aiosqlite en pruebas).

Provee:
- engine (create_async_engine)
- SessionLocal (async_sessionmaker)
- Dependencia FastAPI: get_db
- context manager: session_scope()
- init_models() / check_database_health()

Autor: Equipo SGC
Fecha: 2026-09-14
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from sqlalchemy.pool import StaticPool

from sgc.shared.config import get_settings
from sgc.shared.database.base import Base

logger = logging.getLogger(__name__)

settings = get_settings()

DATABASE_URL: str = settings.database_url


def _engine_kwargs(url: str) -> Dict[str, Any]:
    """Parámetros del engine según el dialecto de la URL."""
    kwargs: Dict[str, Any] = {"echo": settings.db_echo_sql}
    if url.startswith("sqlite"):
        # Una sola conexión compartida: necesaria para :memory:
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
        return kwargs

    kwargs.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=True,
    )
    if settings.db_ssl:
        kwargs["connect_args"] = {"ssl": "require"}
    return kwargs


def build_engine(url: str) -> AsyncEngine:
    return create_async_engine(url, **_engine_kwargs(url))


engine = build_engine(DATABASE_URL)

# ── Session factory
SessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    class_=AsyncSession,
    autoflush=False,
)


# ── Dependencia FastAPI
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
        finally:
            if session.in_transaction():
                await session.rollback()


# ── Context manager reutilizable en jobs/scripts
@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
            # commit/rollback queda a cargo de quien use el scope
        finally:
            if session.in_transaction():
                await session.rollback()


async def init_models(bind: AsyncEngine | None = None) -> None:
    """Crea las tablas registradas en Base.metadata (idempotente)."""
    # Registra todos los modelos en Base.metadata
    import sgc.modules.models  # noqa: F401

    target = bind or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Esquema de base de datos verificado (%d tablas)", len(Base.metadata.tables))


# ── Health check
async def check_database_health(timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Args:
        timeout_s: Tiempo máximo de espera en segundos
        sql: Query SQL a ejecutar (default: "SELECT 1")

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        async with asyncio.timeout(timeout_s):
            async with engine.connect() as conn:
                await conn.execute(text(sql))
        return True
    except Exception as e:
        logger.warning("Health check de base de datos falló: %s", e)
        return False


__all__ = [
    "engine",
    "SessionLocal",
    "build_engine",
    "get_db",
    "session_scope",
    "init_models",
    "check_database_health",
]
# Fin del archivo sgc/shared/database/database.py
