# -*- coding: utf-8 -*-
"""
sgc/routes/master_routes.py

Router maestro de la API (/api/...).

Monta el router de cada módulo de negocio. El orden importa: hallazgos se
monta antes que acciones porque acciones también expone
/hallazgos/{id}/acciones.

Autor: Equipo SGC
Fecha: 2026-09-23
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter

from sgc.modules.auth.routes import get_auth_router
from sgc.modules.indicadores.routes import get_indicadores_router
from sgc.modules.registros_procesos.routes import get_registros_procesos_router
from sgc.modules.capacitaciones.routes import get_capacitaciones_router
from sgc.modules.auditorias.routes import get_auditorias_router
from sgc.modules.hallazgos.routes import get_hallazgos_router
from sgc.modules.acciones.routes import get_acciones_router
from sgc.modules.minutas.routes import get_minutas_router
from sgc.modules.super_admin.routes import get_super_admin_router

logger = logging.getLogger(__name__)

api = APIRouter(prefix="/api")

_loaded: List[str] = []  # trazabilidad/debug


def _include(target: APIRouter, router: APIRouter, name: str) -> None:
    """Incluye un router en la capa dada y registra trazabilidad en logs."""
    target.include_router(router)
    _loaded.append(f"{target.prefix or '/'}:{name}")
    logger.debug(
        "Router '%s' montado en prefix '%s' (router.prefix='%s')",
        name,
        target.prefix or "/",
        getattr(router, "prefix", ""),
    )


_include(api, get_auth_router(), "auth")
_include(api, get_indicadores_router(), "indicadores")
_include(api, get_registros_procesos_router(), "registros_procesos")
_include(api, get_capacitaciones_router(), "capacitaciones")
_include(api, get_auditorias_router(), "auditorias")
_include(api, get_hallazgos_router(), "hallazgos")
_include(api, get_acciones_router(), "acciones")
_include(api, get_minutas_router(), "minutas")
_include(api, get_super_admin_router(), "super_admin")


def loaded_routers() -> List[str]:
    return list(_loaded)


__all__ = ["api", "loaded_routers"]

# Fin del archivo sgc/routes/master_routes.py
