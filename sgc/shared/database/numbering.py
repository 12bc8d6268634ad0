# -*- coding: utf-8 -*-
"""
sgc/shared/database/numbering.py

Numeración correlativa por organización (AUD-2026-001, HAL-2026-014,
AM-007...).

El siguiente número se calcula a partir del mayor sufijo existente con el
mismo prefijo, incluyendo registros dados de baja para no reutilizar
números. La unicidad final la garantiza el UniqueConstraint de cada tabla.

Autor: Equipo SGC
Fecha: 2026-09-19
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.utils.text import like_pattern


def format_numero(prefix: str, numero: int, width: int = 3) -> str:
    return f"{prefix}{numero:0{width}d}"


def parse_sufijo(codigo: str, prefix: str) -> Optional[int]:
    """Sufijo numérico de `codigo` si empieza por `prefix`; None si no es correlativo."""
    if not codigo or not codigo.startswith(prefix):
        return None
    sufijo = codigo[len(prefix):]
    return int(sufijo) if sufijo.isdigit() else None


def orden_numerico(column: Any) -> tuple:
    """
    Criterio de orden para códigos con el mismo prefijo: a igual prefijo, un
    código más largo tiene un sufijo mayor (AM-999 antes que AM-1000).
    """
    return (func.length(column).asc(), column.asc())


async def next_numero(
    session: AsyncSession,
    column: Any,
    org_column: Any,
    organizacion_id: UUID,
    prefix: str,
    width: int = 3,
) -> str:
    """
    Devuelve el siguiente código correlativo para `prefix` en la organización.

    Args:
        column: columna ORM con el código (p. ej. Hallazgo.numero_hallazgo)
        org_column: columna ORM de organización de la misma tabla
        prefix: prefijo completo, separador incluido ("HAL-2026-")
    """
    stmt = select(column).where(
        org_column == organizacion_id,
        column.like(like_pattern(prefix, contains=False), escape="\\"),
    )
    existentes = (await session.execute(stmt)).scalars().all()
    numeros = [n for n in (parse_sufijo(c, prefix) for c in existentes) if n is not None]
    return format_numero(prefix, max(numeros, default=0) + 1, width)


__all__ = ["format_numero", "parse_sufijo", "orden_numerico", "next_numero"]
