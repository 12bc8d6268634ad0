# -*- coding: utf-8 -*-
"""
sgc/modules/super_admin/routes/deps.py
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import get_db
from sgc.modules.super_admin.services import SuperAdminService


async def get_super_admin_service(db: AsyncSession = Depends(get_db)) -> SuperAdminService:
    return SuperAdminService(db)
