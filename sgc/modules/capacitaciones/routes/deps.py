# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/routes/deps.py
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import get_db
from sgc.modules.capacitaciones.services import CapacitacionesService


async def get_capacitaciones_service(db: AsyncSession = Depends(get_db)) -> CapacitacionesService:
    return CapacitacionesService(db)
