# -*- coding: utf-8 -*-
"""
sgc/shared/scheduler/jobs/registros_alertas_job.py

Job periódico que recalcula las alertas de los registros de procesos de
todas las organizaciones y marca como vencidos los que pasaron su fecha.

Crea su propia sesión, aislada de las sesiones de request.

Autor: Equipo SGC
Fecha: 2026-09-23
"""

import logging
from typing import TYPE_CHECKING, Dict

from sqlalchemy.exc import SQLAlchemyError

from sgc.shared.config import get_settings
from sgc.shared.database import SessionLocal

if TYPE_CHECKING:
    from sgc.shared.scheduler import SchedulerService

_logger = logging.getLogger("scheduler.registros_alertas")

JOB_ID = "registros_alertas_refresh"


async def refresh_registros_alertas(session_factory=SessionLocal) -> Dict[str, int]:
    """Tarea del scheduler; los errores de base de datos se registran y no detienen el scheduler."""
    from sgc.modules.registros_procesos.services import RegistrosProcesosService

    async with session_factory() as session:
        try:
            resumen = await RegistrosProcesosService(session).refrescar_alertas()
        except SQLAlchemyError as e:
            _logger.warning("registros_alertas_refresh_error: %s", e, exc_info=True)
            return {"revisados": 0, "vencidos": 0, "alertas_actualizadas": 0}
    _logger.info(
        "registros_alertas_refreshed: revisados=%d vencidos=%d alertas_actualizadas=%d",
        resumen["revisados"],
        resumen["vencidos"],
        resumen["alertas_actualizadas"],
    )
    return resumen


def register_registros_alertas_job(scheduler: "SchedulerService") -> bool:
    """Registra el job si SCHEDULER_ENABLED. Devuelve True si quedó registrado."""
    settings = get_settings()
    if not settings.scheduler_enabled:
        _logger.info("registros_alertas_job_disabled: SCHEDULER_ENABLED=false")
        return False

    interval = max(1, int(settings.registros_alertas_interval_minutes))
    scheduler.add_interval_job(func=refresh_registros_alertas, job_id=JOB_ID, minutes=interval)
    _logger.info("registros_alertas_job_registered: job_id=%s interval_minutes=%d", JOB_ID, interval)
    return True


__all__ = ["JOB_ID", "refresh_registros_alertas", "register_registros_alertas_job"]
