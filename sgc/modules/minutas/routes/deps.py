# -*- coding: utf-8 -*-
"""
sgc/modules/minutas/routes/deps.py
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import get_db
from sgc.modules.minutas.services import MinutasService


async def get_minutas_service(db: AsyncSession = Depends(get_db)) -> MinutasService:
    return MinutasService(db)
