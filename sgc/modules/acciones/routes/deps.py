# -*- coding: utf-8 -*-
"""
sgc/modules/acciones/routes/deps.py
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import get_db
from sgc.modules.acciones.services import AccionesService


async def get_acciones_service(db: AsyncSession = Depends(get_db)) -> AccionesService:
    return AccionesService(db)
