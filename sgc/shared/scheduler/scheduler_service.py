# -*- coding: utf-8 -*-
"""
sgc/shared/scheduler/scheduler_service.py

Servicio de programación de tareas periódicas usando APScheduler.

Autor: Equipo SGC
Fecha: 2026-09-23
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from apscheduler.executors.asyncio import AsyncIOExecutor
from apscheduler.jobstores.memory import MemoryJobStore
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

logger = logging.getLogger(__name__)


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


class SchedulerService:
    """
    Envoltorio de AsyncIOScheduler (UTC, job store en memoria).

    - Un job no se solapa consigo mismo (max_instances=1)
    - Las ejecuciones perdidas se combinan en una sola (coalesce)
    """

    def __init__(self):
        self._scheduler = AsyncIOScheduler(
            jobstores={"default": MemoryJobStore()},
            executors={"default": AsyncIOExecutor()},
            job_defaults={
                "coalesce": True,
                "max_instances": 1,
                "misfire_grace_time": 30,
            },
            timezone="UTC",
        )
        self._started = False

    def start(self) -> None:
        if not self._started:
            self._scheduler.start()
            self._started = True
            logger.info("SchedulerService iniciado")

    def shutdown(self, wait: bool = True) -> None:
        """
        Detiene el scheduler.

        Args:
            wait: Si True, espera a que terminen los jobs en ejecución
        """
        if self._started:
            self._scheduler.shutdown(wait=wait)
            self._started = False
            logger.info("SchedulerService detenido")

    def add_interval_job(
        self,
        func: Callable,
        job_id: str,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        **kwargs: Any,
    ) -> str:
        self._scheduler.add_job(
            func=func,
            trigger=IntervalTrigger(hours=hours, minutes=minutes, seconds=seconds),
            id=job_id,
            name=job_id,
            replace_existing=True,
            kwargs=kwargs,
        )
        logger.info("Job '%s' agregado: cada %dh %dm %ds", job_id, hours, minutes, seconds)
        return job_id

    def get_jobs(self) -> List[Dict[str, Any]]:
        return [
            {
                "id": job.id,
                "name": job.name,
                # los jobs pendientes (scheduler sin arrancar) no tienen next_run_time
                "next_run": _iso(getattr(job, "next_run_time", None)),
                "trigger": str(job.trigger),
            }
            for job in self._scheduler.get_jobs()
        ]

    @property
    def is_running(self) -> bool:
        return self._started and self._scheduler.running


_scheduler_instance: Optional[SchedulerService] = None


def get_scheduler() -> SchedulerService:
    """Instancia global del scheduler (singleton)."""
    global _scheduler_instance
    if _scheduler_instance is None:
        _scheduler_instance = SchedulerService()
    return _scheduler_instance


# Fin del archivo sgc/shared/scheduler/scheduler_service.py
