# -*- coding: utf-8 -*-
"""
Tests de endpoints /api/auditorias (auditorías, aspectos y relaciones).
"""

from datetime import datetime, timezone

import pytest

BASE = "/api/auditorias"


def _payload(**overrides):
    data = {
        "titulo": "Auditoría interna de compras",
        "areas": ["Compras", "Almacén"],
        "fecha_programada": "2026-11-15T09:00:00Z",
        "objetivos": "Verificar el control de proveedores externos",
        "alcance": "Proceso de compras y recepción",
        "criterios": "ISO 9001:2015 cláusula 8.4",
    }
    data.update(overrides)
    return data


async def _crear(client, headers, **overrides):
    r = await client.post(BASE, json=_payload(**overrides), headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["auditoria"]


@pytest.mark.asyncio
async def test_codigo_por_defecto_correlativo(client, tenant, other_tenant):
    anio = datetime.now(timezone.utc).year
    a = await _crear(client, tenant.user.headers)
    b = await _crear(client, tenant.user.headers)
    c = await _crear(client, other_tenant.user.headers)
    assert a["codigo"] == f"AUD-{anio}-001"
    assert b["codigo"] == f"AUD-{anio}-002"
    assert c["codigo"] == f"AUD-{anio}-001"
    assert a["estado"] == "planificada"
    assert a["aspectos"] == []
    assert a["relaciones"] == []


@pytest.mark.asyncio
async def test_codigo_explicito_normalizado_y_unico(client, tenant):
    h = tenant.user.headers
    a = await _crear(client, h, codigo=" aud-esp-01 ")
    assert a["codigo"] == "AUD-ESP-01"

    r = await client.post(BASE, json=_payload(codigo="AUD-ESP-01"), headers=h)
    assert r.status_code == 409

    b = await _crear(client, h, codigo="AUD-ESP-02")
    r = await client.put(f"{BASE}/{b['id']}", json={"codigo": "aud-esp-01"}, headers=h)
    assert r.status_code == 409

    # el mismo código propio no es conflicto
    r = await client.put(
        f"{BASE}/{b['id']}", json={"codigo": "AUD-ESP-02", "estado": "en_progreso"}, headers=h
    )
    assert r.status_code == 200
    assert r.json()["auditoria"]["estado"] == "en_progreso"


@pytest.mark.asyncio
async def test_crear_sin_areas_422(client, tenant):
    r = await client.post(BASE, json=_payload(areas=[]), headers=tenant.user.headers)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_crear_con_aspectos_y_relaciones(client, tenant):
    h = tenant.user.headers
    aud = await _crear(
        client,
        h,
        aspectos=[
            {"proceso_nombre": "Compras", "auditor_nombre": "Luis", "conformidad": "conforme"},
            {"proceso_nombre": "Almacén", "conformidad": "no_conforme", "observaciones": "Sin rotular"},
        ],
        relaciones=[{"destino_tipo": "hallazgo", "destino_id": "hal-1"}],
    )
    assert len(aud["aspectos"]) == 2
    assert [r["destino_id"] for r in aud["relaciones"]] == ["hal-1"]

    r = await client.get(f"{BASE}/{aud['id']}", headers=h)
    assert r.status_code == 200
    detalle = r.json()
    assert {a["proceso_nombre"] for a in detalle["aspectos"]} == {"Compras", "Almacén"}
    assert detalle["relaciones"][0]["destino_tipo"] == "hallazgo"


@pytest.mark.asyncio
async def test_relaciones_duplicadas_en_el_alta_409(client, tenant):
    rel = {"destino_tipo": "proceso", "destino_id": "proc-1"}
    r = await client.post(BASE, json=_payload(relaciones=[rel, rel]), headers=tenant.user.headers)
    assert r.status_code == 409
    assert r.json()["detail"] == "Esta relación ya existe"

    # la transacción se revierte completa
    r = await client.get(BASE, headers=tenant.user.headers)
    assert r.json()["total"] == 0


@pytest.mark.asyncio
async def test_relaciones(client, tenant):
    h = tenant.user.headers
    aud = await _crear(client, h)
    url = f"{BASE}/{aud['id']}/relaciones"

    r = await client.post(url, json={"destino_tipo": "indicador", "destino_id": "IND-001"}, headers=h)
    assert r.status_code == 201
    relacion = r.json()["relacion"]

    r = await client.post(url, json={"destino_tipo": "indicador", "destino_id": "IND-001"}, headers=h)
    assert r.status_code == 409

    r = await client.delete(f"{url}/{relacion['id']}", headers=h)
    assert r.status_code == 200
    r = await client.get(url, headers=h)
    assert r.json()["total"] == 0

    r = await client.delete(f"{url}/{relacion['id']}", headers=h)
    assert r.status_code == 404
    assert r.json()["detail"] == "Relación no encontrada"


@pytest.mark.asyncio
async def test_aspectos(client, tenant):
    h = tenant.user.headers
    aud = await _crear(client, h)
    url = f"{BASE}/{aud['id']}/aspectos"

    r = await client.post(url, json={"proceso_nombre": "Ventas"}, headers=h)
    assert r.status_code == 201
    aspecto = r.json()["aspecto"]
    assert aspecto["conformidad"] is None

    r = await client.put(
        f"{url}/{aspecto['id']}", json={"conformidad": "observacion", "observaciones": "Mejorable"}, headers=h
    )
    assert r.status_code == 200
    assert r.json()["aspecto"]["conformidad"] == "observacion"

    r = await client.delete(f"{url}/{aspecto['id']}", headers=h)
    assert r.status_code == 200
    r = await client.get(url, headers=h)
    assert r.json()["total"] == 0


@pytest.mark.asyncio
async def test_listado_filtra_por_area_sin_distinguir_mayusculas(client, tenant):
    h = tenant.user.headers
    await _crear(client, h, titulo="Compras", areas=["Compras"])
    await _crear(client, h, titulo="Producción", areas=["Producción", "Mantenimiento"], estado="completada")

    r = await client.get(BASE, params={"area": "mantenimiento"}, headers=h)
    assert [a["titulo"] for a in r.json()["items"]] == ["Producción"]
    assert r.json()["total"] == 1

    r = await client.get(BASE, params={"estado": "planificada"}, headers=h)
    assert [a["titulo"] for a in r.json()["items"]] == ["Compras"]

    r = await client.get(BASE, params={"busqueda": "produc"}, headers=h)
    assert r.json()["total"] == 1


@pytest.mark.asyncio
async def test_eliminar_y_aislamiento(client, tenant, other_tenant):
    aud = await _crear(client, tenant.user.headers)

    r = await client.get(f"{BASE}/{aud['id']}", headers=other_tenant.admin.headers)
    assert r.status_code == 404
    assert r.json()["detail"] == "Auditoría no encontrada"

    r = await client.delete(f"{BASE}/{aud['id']}", headers=tenant.user.headers)
    assert r.status_code == 403
    r = await client.delete(f"{BASE}/{aud['id']}", headers=tenant.manager.headers)
    assert r.status_code == 200
    r = await client.get(f"{BASE}/{aud['id']}/aspectos", headers=tenant.user.headers)
    assert r.status_code == 404
