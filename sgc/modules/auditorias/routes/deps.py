# -*- coding: utf-8 -*-
"""
sgc/modules/auditorias/routes/deps.py
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import get_db
from sgc.modules.auditorias.services import AuditoriasService


async def get_auditorias_service(db: AsyncSession = Depends(get_db)) -> AuditoriasService:
    return AuditoriasService(db)
