# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores/routes/deps.py

Dependencias inyectables para el servicio de indicadores.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import get_db
from sgc.modules.indicadores.services import IndicadoresService


async def get_indicadores_service(db: AsyncSession = Depends(get_db)) -> IndicadoresService:
    return IndicadoresService(db)
