# -*- coding: utf-8 -*-
"""
sgc/modules/auditorias/facades/numeracion.py

Código por defecto de auditoría: AUD-{año}-{NNN}, correlativo por
organización y año.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import next_numero
from sgc.modules.auditorias.models import Auditoria


def prefijo_auditoria(fecha: datetime) -> str:
    return f"AUD-{fecha.year}-"


async def siguiente_codigo(session: AsyncSession, organizacion_id: UUID, fecha: datetime) -> str:
    return await next_numero(
        session, Auditoria.codigo, Auditoria.organizacion_id, organizacion_id, prefijo_auditoria(fecha)
    )


__all__ = ["prefijo_auditoria", "siguiente_codigo"]
