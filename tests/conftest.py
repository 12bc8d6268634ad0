# -*- coding: utf-8 -*-
"""
Config global de tests para SGC.

- Entorno `test` con SQLite en memoria (un engine compartido, StaticPool)
- Esquema creado y destruido por test (fixture `schema`)
- App FastAPI + cliente httpx con ASGITransport
- Organizaciones y usuarios por rol, con tokens ya emitidos

Los fixtures de datos devuelven SimpleNamespace con ids/tokens y no
instancias ORM: así los tests no dependen del estado de una sesión.
"""

import os

# Variables de entorno ANTES de importar cualquier módulo de sgc:
# el engine global se construye al importar sgc.shared.database.
os.environ["PYTHON_ENV"] = "test"
os.environ["DB_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-for-sgc-suite-0123456789abcdef"
os.environ["SCHEDULER_ENABLED"] = "false"
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.pop("SUPER_ADMIN_EMAIL", None)
os.environ.pop("SUPER_ADMIN_PASSWORD", None)

from collections.abc import AsyncIterator
from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient

from sgc.shared.database import Base, SessionLocal, engine, init_models
from sgc.shared.utils.security import hash_password
from sgc.modules.auth.enums import OrganizationPlan, UserRole
from sgc.modules.auth.facades.plans import build_plan_settings
from sgc.modules.auth.models import AppUser, Organization
from sgc.modules.auth.services.auth_service import issue_tokens

DEFAULT_PASSWORD = "Secreta123"


# -----------------------------------------------------------------------------
# Base de datos
# -----------------------------------------------------------------------------
@pytest.fixture
async def schema() -> AsyncIterator[None]:
    """Crea todas las tablas y las elimina al terminar el test."""
    await init_models()
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db(schema):
    async with SessionLocal() as session:
        yield session


# -----------------------------------------------------------------------------
# App FastAPI y cliente httpx
# -----------------------------------------------------------------------------
@pytest.fixture
def app():
    from sgc.main import create_app

    return create_app()


@pytest.fixture
async def client(app, schema) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


# -----------------------------------------------------------------------------
# Datos: organizaciones y usuarios
# -----------------------------------------------------------------------------
def _as_namespace(user: AppUser, password: str) -> SimpleNamespace:
    tokens = issue_tokens(user)
    return SimpleNamespace(
        id=user.id,
        organization_id=user.organization_id,
        email=user.email,
        password=password,
        role=user.role,
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        headers={"Authorization": f"Bearer {tokens.access_token}"},
    )


async def create_tenant(
    name: str,
    slug: str,
    *,
    plan: OrganizationPlan = OrganizationPlan.PROFESSIONAL,
    roles=(UserRole.ADMIN, UserRole.MANAGER, UserRole.EMPLOYEE, UserRole.USER),
) -> SimpleNamespace:
    """Organización con un usuario por rol (`admin`, `manager`, `employee`, `user`)."""
    async with SessionLocal() as session:
        organization = Organization(
            name=name,
            plan=plan,
            contact_email=f"contacto@{slug}.com",
            settings=build_plan_settings(plan),
            is_active=True,
        )
        session.add(organization)
        await session.flush()

        users = {}
        for role in roles:
            user = AppUser(
                organization_id=organization.id,
                name=f"{role.value.title()} {name}",
                email=f"{role.value}@{slug}.com",
                password_hash=hash_password(DEFAULT_PASSWORD),
                role=role,
                is_active=True,
            )
            session.add(user)
            users[role.value] = user
        await session.commit()

        return SimpleNamespace(
            id=organization.id,
            name=organization.name,
            **{key: _as_namespace(u, DEFAULT_PASSWORD) for key, u in users.items()},
        )


@pytest.fixture
async def tenant(schema) -> SimpleNamespace:
    return await create_tenant("Acme Calidad", "acme")


@pytest.fixture
async def other_tenant(schema) -> SimpleNamespace:
    return await create_tenant("Otra Empresa", "otra")


@pytest.fixture
async def super_admin(schema) -> SimpleNamespace:
    platform = await create_tenant(
        "Plataforma SGC",
        "plataforma",
        plan=OrganizationPlan.ENTERPRISE,
        roles=(UserRole.SUPER_ADMIN,),
    )
    return platform.super_admin


# Fin del archivo tests/conftest.py
