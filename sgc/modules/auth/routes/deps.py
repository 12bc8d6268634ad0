# -*- coding: utf-8 -*-
"""
sgc/modules/auth/routes/deps.py

Dependencias inyectables para los servicios de Auth.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import get_db
from sgc.modules.auth.services import AuthService


async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(db)
