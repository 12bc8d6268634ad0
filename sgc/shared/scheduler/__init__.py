# -*- coding: utf-8 -*-
"""
sgc/shared/scheduler/__init__.py

Jobs programados con APScheduler.

Autor: Equipo SGC
Fecha: 2026-09-23
"""

from .scheduler_service import SchedulerService, get_scheduler

__all__ = [
    "SchedulerService",
    "get_scheduler",
]
