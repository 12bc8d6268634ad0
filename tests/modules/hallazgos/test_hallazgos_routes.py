# -*- coding: utf-8 -*-
"""
Tests de endpoints /api/hallazgos.
"""

from datetime import datetime, timezone

import pytest

BASE = "/api/hallazgos"


def _payload(**overrides):
    data = {
        "titulo": "Registros de calibración incompletos",
        "descripcion": "No se encontraron los certificados de calibración de 3 equipos",
        "origen": "auditoria_interna",
        "categoria": "no_conformidad",
        "punto_norma_afectado": "7.1.5",
        "prioridad": "alta",
    }
    data.update(overrides)
    return data


async def _crear(client, headers, **overrides):
    r = await client.post(BASE, json=_payload(**overrides), headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["hallazgo"]


async def _cambiar_estado(client, headers, hallazgo_id, estado):
    return await client.put(f"{BASE}/{hallazgo_id}/estado", json={"estado": estado}, headers=headers)


@pytest.mark.asyncio
async def test_crear_hallazgo_numera_correlativo_por_anio(client, tenant, other_tenant):
    anio = datetime.now(timezone.utc).year
    primero = await _crear(client, tenant.user.headers)
    segundo = await _crear(client, tenant.user.headers, titulo="Otro")
    ajeno = await _crear(client, other_tenant.user.headers)

    assert primero["numero_hallazgo"] == f"HAL-{anio}-001"
    assert segundo["numero_hallazgo"] == f"HAL-{anio}-002"
    assert ajeno["numero_hallazgo"] == f"HAL-{anio}-001"
    assert primero["estado"] == "deteccion"
    assert primero["severidad"] == "media"
    assert primero["fecha_deteccion"] is not None


@pytest.mark.asyncio
async def test_numero_no_se_reutiliza_tras_baja(client, tenant):
    anio = datetime.now(timezone.utc).year
    primero = await _crear(client, tenant.user.headers)
    r = await client.delete(f"{BASE}/{primero['id']}", headers=tenant.manager.headers)
    assert r.status_code == 200
    segundo = await _crear(client, tenant.user.headers)
    assert segundo["numero_hallazgo"] == f"HAL-{anio}-002"


@pytest.mark.asyncio
async def test_crear_sin_descripcion_422(client, tenant):
    payload = _payload()
    payload.pop("descripcion")
    r = await client.post(BASE, json=payload, headers=tenant.user.headers)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_actualizar_campos_de_tratamiento(client, tenant):
    h = tenant.user.headers
    hallazgo = await _crear(client, h)
    r = await client.put(
        f"{BASE}/{hallazgo['id']}",
        json={"causa_raiz": "Falta de programa de calibración", "prioridad": "critica"},
        headers=h,
    )
    assert r.status_code == 200, r.text
    data = r.json()["hallazgo"]
    assert data["causa_raiz"] == "Falta de programa de calibración"
    assert data["prioridad"] == "critica"
    assert data["estado"] == "deteccion"


@pytest.mark.asyncio
async def test_actualizar_sin_campos_400(client, tenant):
    hallazgo = await _crear(client, tenant.user.headers)
    r = await client.put(f"{BASE}/{hallazgo['id']}", json={}, headers=tenant.user.headers)
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_ciclo_completo_hasta_finalizado(client, tenant):
    h = tenant.user.headers
    hallazgo = await _crear(client, h)
    for estado in ("planificacion_ai", "ejecucion_ai", "verificacion_cierre", "finalizado"):
        r = await _cambiar_estado(client, h, hallazgo["id"], estado)
        assert r.status_code == 200, r.text
        assert r.json()["hallazgo"]["estado"] == estado
    assert r.json()["hallazgo"]["fecha_cierre"] is not None

    # finalizado es terminal
    r = await _cambiar_estado(client, h, hallazgo["id"], "verificacion_cierre")
    assert r.status_code == 409


@pytest.mark.asyncio
async def test_salto_de_estado_409(client, tenant):
    hallazgo = await _crear(client, tenant.user.headers)
    r = await _cambiar_estado(client, tenant.user.headers, hallazgo["id"], "finalizado")
    assert r.status_code == 409
    r = await _cambiar_estado(client, tenant.user.headers, hallazgo["id"], "deteccion")
    assert r.status_code == 409


@pytest.mark.asyncio
async def test_estado_desconocido_422(client, tenant):
    hallazgo = await _crear(client, tenant.user.headers)
    r = await _cambiar_estado(client, tenant.user.headers, hallazgo["id"], "archivado")
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_eliminar_requiere_manager(client, tenant):
    hallazgo = await _crear(client, tenant.user.headers)
    r = await client.delete(f"{BASE}/{hallazgo['id']}", headers=tenant.user.headers)
    assert r.status_code == 403
    r = await client.delete(f"{BASE}/{hallazgo['id']}", headers=tenant.admin.headers)
    assert r.status_code == 200
    r = await client.get(f"{BASE}/{hallazgo['id']}", headers=tenant.admin.headers)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_hallazgo_de_otra_organizacion_404(client, tenant, other_tenant):
    hallazgo = await _crear(client, tenant.user.headers)
    r = await client.get(f"{BASE}/{hallazgo['id']}", headers=other_tenant.admin.headers)
    assert r.status_code == 404
    r = await _cambiar_estado(client, other_tenant.admin.headers, hallazgo["id"], "planificacion_ai")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_listado_filtros_recientes_y_estadisticas(client, tenant):
    h = tenant.user.headers
    a = await _crear(client, h, titulo="A", categoria="observacion", prioridad="baja")
    b = await _crear(client, h, titulo="B", origen="queja_cliente")
    c = await _crear(client, h, titulo="C")
    await _cambiar_estado(client, h, b["id"], "planificacion_ai")

    r = await client.get(BASE, headers=h)
    assert r.json()["total"] == 3

    r = await client.get(BASE, params={"categoria": "observacion"}, headers=h)
    assert [i["id"] for i in r.json()["items"]] == [a["id"]]

    r = await client.get(BASE, params={"estado": "planificacion_ai"}, headers=h)
    assert [i["id"] for i in r.json()["items"]] == [b["id"]]

    r = await client.get(f"{BASE}/recent", params={"limit": 2}, headers=h)
    assert len(r.json()["items"]) == 2

    r = await client.get(f"{BASE}/stats", headers=h)
    stats = r.json()
    assert stats["total"] == 3
    assert stats["en_deteccion"] == 2
    assert stats["en_tratamiento"] == 1
    assert stats["en_verificacion"] == 0
    assert stats["cerrados"] == 0
    assert stats["por_prioridad"]["alta"] == 2
    assert stats["por_categoria"]["no_conformidad"] == 2
    assert stats["por_origen"]["queja_cliente"] == 1
    assert c["id"]


@pytest.mark.asyncio
async def test_busqueda_paginada(client, tenant):
    h = tenant.user.headers
    for i in range(3):
        await _crear(client, h, titulo=f"Calibración equipo {i}")
    await _crear(client, h, titulo="Capacitación pendiente", descripcion="Personal sin inducción")

    r = await client.get(f"{BASE}/search", params={"q": "calibración", "page": 1, "limit": 2}, headers=h)
    assert r.status_code == 200
    body = r.json()
    assert len(body["items"]) == 2
    assert body["pagination"] == {
        "page": 1,
        "limit": 2,
        "total": 3,
        "total_pages": 2,
        "has_next": True,
        "has_prev": False,
    }

    r = await client.get(f"{BASE}/search", params={"q": "calibración", "page": 2, "limit": 2}, headers=h)
    assert len(r.json()["items"]) == 1
    assert r.json()["pagination"]["has_prev"] is True


@pytest.mark.asyncio
async def test_busqueda_sin_termino_400(client, tenant):
    r = await client.get(f"{BASE}/search", params={"q": "  "}, headers=tenant.user.headers)
    assert r.status_code == 400
