# -*- coding: utf-8 -*-
"""
sgc/shared/database/transactions.py

Helper transaccional compartido por los services de todos los módulos.

Autor: Equipo SGC
Fecha: 2026-09-15
"""

from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


async def commit_or_raise(db: AsyncSession, work: Callable[[], Awaitable[T]]) -> T:
    """
    Ejecuta work() dentro de un contexto transaccional.

    Aplica commit si work() tiene éxito; rollback y re-lanza si falla.

    Args:
        db: AsyncSession
        work: corrutina sin argumentos a ejecutar

    Returns:
        Resultado de work()
    """
    try:
        result = await work()
        await db.commit()
        return result
    except Exception:
        await db.rollback()
        raise


__all__ = ["commit_or_raise"]
