# -*- coding: utf-8 -*-
"""
sgc/shared/utils/dates.py

Helpers de fechas en UTC.

SQLite devuelve datetimes sin zona horaria aunque la columna sea
DateTime(timezone=True); `as_utc` normaliza ambos casos para poder
comparar con `now_utc()`.

Autor: Equipo SGC
Fecha: 2026-09-15
"""

import calendar
import datetime as dt
from typing import Optional


def now_utc() -> dt.datetime:
    """Timestamp actual UTC (centralizado para facilitar mocks en tests)."""
    return dt.datetime.now(dt.timezone.utc)


def as_utc(value: Optional[dt.datetime]) -> Optional[dt.datetime]:
    """Devuelve el datetime en UTC; los naive se asumen UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


def add_months(value: dt.datetime, months: int) -> dt.datetime:
    """Suma meses de calendario, recortando el día al último del mes destino."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def start_of_month(value: dt.datetime) -> dt.datetime:
    return value.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


__all__ = ["now_utc", "as_utc", "add_months", "start_of_month"]
# Fin del archivo sgc/shared/utils/dates.py
