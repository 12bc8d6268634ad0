# -*- coding: utf-8 -*-
"""
Tests de la app FastAPI: health, raíz, ciclo de vida y bootstrap del super admin.
"""

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr
from sqlalchemy import select

import sgc.main as main
from sgc.shared.database import SessionLocal
from sgc.modules.auth.enums import OrganizationPlan, UserRole
from sgc.modules.auth.models import AppUser, Organization
from sgc.modules.auth.services.auth_service import ensure_super_admin


@pytest.mark.asyncio
async def test_health(client):
    r = await client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["environment"] == "test"
    assert body["database"] == {"reachable": True}
    assert body["scheduler"] == {"running": False, "jobs": []}
    assert body["service"]["name"]
    assert body["timestamp"]


@pytest.mark.asyncio
async def test_raiz(client):
    r = await client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "active"


@pytest.mark.asyncio
async def test_ruta_inexistente_404(client):
    r = await client.get("/api/no-existe")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_error_no_manejado_devuelve_json_500(app, schema):
    @app.get("/api/_falla")
    async def _falla():
        raise RuntimeError("boom")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        r = await c.get("/api/_falla", headers={"X-Request-ID": "req-123"})

    assert r.status_code == 500
    assert r.headers["content-type"].startswith("application/json")
    assert r.headers["x-request-id"] == "req-123"
    assert r.json() == {
        "detail": {
            "error_code": "INTERNAL_SERVER_ERROR",
            "message": "Error interno del servidor",
            "request_id": "req-123",
        }
    }


@pytest.mark.asyncio
async def test_lifespan_crea_super_admin(monkeypatch, schema):
    monkeypatch.setattr(main.settings, "super_admin_email", "root@plataforma.com")
    monkeypatch.setattr(main.settings, "super_admin_password", SecretStr("ClaveMaestra1"))

    app = main.create_app()
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as c:
            r = await c.post(
                "/api/auth/login",
                json={"email": "root@plataforma.com", "password": "ClaveMaestra1"},
            )
            assert r.status_code == 200, r.text
            assert r.json()["user"]["role"] == "super_admin"
            token = r.json()["tokens"]["access_token"]

            r = await c.get("/api/super-admin/dashboard", headers={"Authorization": f"Bearer {token}"})
            assert r.status_code == 200

    # un segundo arranque no duplica nada
    async with LifespanManager(main.create_app()):
        pass

    async with SessionLocal() as db:
        users = (await db.execute(select(AppUser).where(AppUser.role == UserRole.SUPER_ADMIN))).scalars().all()
        orgs = (await db.execute(select(Organization))).scalars().all()
    assert len(users) == 1
    assert [o.name for o in orgs] == [main.settings.platform_organization_name]
    assert orgs[0].plan == OrganizationPlan.ENTERPRISE


@pytest.mark.asyncio
async def test_ensure_super_admin_reutiliza_organizacion(db, super_admin):
    creado = await ensure_super_admin(
        db,
        email="otro.root@plataforma.com",
        password="ClaveMaestra2",
        name="Segundo Root",
        organization_name="Plataforma SGC",
    )
    assert creado is not None
    assert creado.organization_id == super_admin.organization_id
    assert creado.role == UserRole.SUPER_ADMIN


@pytest.mark.asyncio
async def test_ensure_super_admin_existente_devuelve_none(db, super_admin):
    resultado = await ensure_super_admin(
        db,
        email=super_admin.email,
        password="da-igual-123",
        name="Root",
        organization_name="Plataforma SGC",
    )
    assert resultado is None
