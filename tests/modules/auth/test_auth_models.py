# -*- coding: utf-8 -*-
"""
Tests de los modelos de organización y usuario.
"""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import InvalidRequestError

from sgc.modules.auth.models import AppUser, Organization


@pytest.mark.asyncio
async def test_usuario_carga_su_organizacion(db, tenant):
    user = (await db.execute(select(AppUser).where(AppUser.id == tenant.admin.id))).scalars().one()
    assert user.organization.id == tenant.id
    assert user.organization.name == "Acme Calidad"


@pytest.mark.asyncio
async def test_usuarios_de_organizacion_no_se_cargan_implicitamente(db, tenant):
    org = (await db.execute(select(Organization).where(Organization.id == tenant.id))).scalars().one()
    with pytest.raises(InvalidRequestError):
        org.users
