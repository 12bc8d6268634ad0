# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/routes/deps.py
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import get_db
from sgc.modules.hallazgos.services import HallazgosService


async def get_hallazgos_service(db: AsyncSession = Depends(get_db)) -> HallazgosService:
    return HallazgosService(db)
