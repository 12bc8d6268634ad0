# -*- coding: utf-8 -*-
"""
Tests de endpoints /api/acciones y /api/hallazgos/{id}/acciones.
"""

from uuid import UUID

import pytest
from sqlalchemy import update

from sgc.modules.acciones.models import Accion

BASE = "/api/acciones"


async def _hallazgo(client, headers, titulo="Equipo sin calibrar"):
    r = await client.post(
        "/api/hallazgos",
        json={"titulo": titulo, "descripcion": "Balanza fuera de tolerancia"},
        headers=headers,
    )
    assert r.status_code == 201, r.text
    return r.json()["hallazgo"]


async def _crear(client, headers, hallazgo_id, **overrides):
    payload = {
        "hallazgo_id": hallazgo_id,
        "descripcion_accion": "Calibrar la balanza con laboratorio acreditado",
        "titulo": "Calibración",
        "responsable_accion": "Mantenimiento",
    }
    payload.update(overrides)
    r = await client.post(BASE, json=payload, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["accion"]


@pytest.mark.asyncio
async def test_crear_accion_numera_am(client, tenant):
    h = tenant.user.headers
    hallazgo = await _hallazgo(client, h)
    primera = await _crear(client, h, hallazgo["id"])
    segunda = await _crear(client, h, hallazgo["id"], titulo="Verificación")

    assert primera["numero_accion"] == "AM-001"
    assert segunda["numero_accion"] == "AM-002"
    assert primera["estado"] == "p1_planificacion_accion"
    assert primera["eficacia"] == "pendiente"
    assert primera["prioridad"] == "media"


@pytest.mark.asyncio
async def test_crear_accion_para_hallazgo_inexistente_404(client, tenant):
    r = await client.post(
        BASE,
        json={"hallazgo_id": "00000000-0000-0000-0000-000000000000", "descripcion_accion": "x"},
        headers=tenant.user.headers,
    )
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_crear_accion_sobre_hallazgo_de_otra_organizacion_404(client, tenant, other_tenant):
    hallazgo = await _hallazgo(client, tenant.user.headers)
    r = await client.post(
        BASE,
        json={"hallazgo_id": hallazgo["id"], "descripcion_accion": "x"},
        headers=other_tenant.user.headers,
    )
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_crear_accion_sin_descripcion_422(client, tenant):
    hallazgo = await _hallazgo(client, tenant.user.headers)
    r = await client.post(BASE, json={"hallazgo_id": hallazgo["id"]}, headers=tenant.user.headers)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_actualizar_accion_por_fases(client, tenant):
    h = tenant.user.headers
    hallazgo = await _hallazgo(client, h)
    accion = await _crear(client, h, hallazgo["id"])

    r = await client.put(
        f"{BASE}/{accion['id']}",
        json={"estado": "p2_ejecucion_accion", "comentarios_ejecucion": "Calibrada el lunes"},
        headers=h,
    )
    assert r.status_code == 200, r.text
    data = r.json()["accion"]
    assert data["estado"] == "p2_ejecucion_accion"
    assert data["comentarios_ejecucion"] == "Calibrada el lunes"

    r = await client.put(
        f"{BASE}/{accion['id']}",
        json={"estado": "completado", "eficacia": "eficaz", "resultado_verificacion": "Conforme"},
        headers=h,
    )
    data = r.json()["accion"]
    assert data["estado"] == "completado"
    assert data["eficacia"] == "eficaz"
    assert data["numero_accion"] == "AM-001"


@pytest.mark.asyncio
async def test_actualizar_accion_sin_campos_400(client, tenant):
    h = tenant.user.headers
    hallazgo = await _hallazgo(client, h)
    accion = await _crear(client, h, hallazgo["id"])
    r = await client.put(f"{BASE}/{accion['id']}", json={}, headers=h)
    assert r.status_code == 400
    assert r.json()["detail"] == "No hay campos válidos para actualizar."


@pytest.mark.asyncio
async def test_campos_no_editables_se_ignoran(client, tenant):
    h = tenant.user.headers
    hallazgo = await _hallazgo(client, h)
    accion = await _crear(client, h, hallazgo["id"])
    r = await client.put(
        f"{BASE}/{accion['id']}",
        json={"numero_accion": "AM-999", "observaciones": "ok"},
        headers=h,
    )
    assert r.status_code == 200
    assert r.json()["accion"]["numero_accion"] == "AM-001"


@pytest.mark.asyncio
async def test_listar_acciones_por_hallazgo(client, tenant):
    h = tenant.user.headers
    h1 = await _hallazgo(client, h, "Uno")
    h2 = await _hallazgo(client, h, "Dos")
    await _crear(client, h, h1["id"])
    await _crear(client, h, h2["id"])
    await _crear(client, h, h1["id"])

    r = await client.get(f"/api/hallazgos/{h1['id']}/acciones", headers=h)
    assert r.status_code == 200
    assert [a["numero_accion"] for a in r.json()["items"]] == ["AM-001", "AM-003"]

    r = await client.get(BASE, params={"hallazgo_id": h2["id"]}, headers=h)
    assert [a["numero_accion"] for a in r.json()["items"]] == ["AM-002"]

    r = await client.get(BASE, headers=h)
    assert r.json()["total"] == 3


@pytest.mark.asyncio
async def test_listar_acciones_de_hallazgo_inexistente_404(client, tenant):
    r = await client.get(
        "/api/hallazgos/00000000-0000-0000-0000-000000000000/acciones", headers=tenant.user.headers
    )
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_eliminar_accion(client, tenant):
    h = tenant.user.headers
    hallazgo = await _hallazgo(client, h)
    accion = await _crear(client, h, hallazgo["id"])

    r = await client.delete(f"{BASE}/{accion['id']}", headers=h)
    assert r.status_code == 403

    r = await client.delete(f"{BASE}/{accion['id']}", headers=tenant.manager.headers)
    assert r.status_code == 200
    assert r.json()["message"] == "Acción eliminada con éxito."

    r = await client.get(f"{BASE}/{accion['id']}", headers=h)
    assert r.status_code == 404
    assert r.json()["detail"] == "Acción no encontrada."

    # el número no se reutiliza
    nueva = await _crear(client, h, hallazgo["id"])
    assert nueva["numero_accion"] == "AM-002"


@pytest.mark.asyncio
async def test_listado_ordena_por_valor_numerico(client, db, tenant):
    h = tenant.user.headers
    hallazgo = await _hallazgo(client, h)
    primera = await _crear(client, h, hallazgo["id"])
    segunda = await _crear(client, h, hallazgo["id"])

    await db.execute(update(Accion).where(Accion.id == UUID(primera["id"])).values(numero_accion="AM-1000"))
    await db.execute(update(Accion).where(Accion.id == UUID(segunda["id"])).values(numero_accion="AM-999"))
    await db.commit()

    r = await client.get(BASE, headers=h)
    assert [a["numero_accion"] for a in r.json()["items"]] == ["AM-999", "AM-1000"]

    tercera = await _crear(client, h, hallazgo["id"])
    assert tercera["numero_accion"] == "AM-1001"
