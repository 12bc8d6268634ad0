# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/routes/deps.py
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import get_db
from sgc.modules.registros_procesos.services import RegistrosProcesosService


async def get_registros_service(db: AsyncSession = Depends(get_db)) -> RegistrosProcesosService:
    return RegistrosProcesosService(db)
