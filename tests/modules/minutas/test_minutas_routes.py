# -*- coding: utf-8 -*-
"""
Tests de endpoints /api/minutas.
"""

from uuid import uuid4

import pytest

BASE = "/api/minutas"


async def _crear(client, headers, **overrides):
    data = {
        "titulo": "Revisión por la dirección Q3",
        "responsable": "Gerencia General",
        "descripcion": "Revisión trimestral del SGC",
        "fecha": "2026-09-30T15:00:00Z",
        "lugar": "Sala de reuniones",
        "agenda": "1. Resultados de auditoría 2. Indicadores",
        "acuerdos": "Actualizar matriz de riesgos",
    }
    data.update(overrides)
    r = await client.post(BASE, json=data, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["minuta"]


@pytest.mark.asyncio
async def test_crud_minuta(client, tenant):
    h = tenant.user.headers
    minuta = await _crear(client, h)
    assert minuta["lugar"] == "Sala de reuniones"

    r = await client.get(f"{BASE}/{minuta['id']}", headers=h)
    assert r.status_code == 200
    assert r.json()["titulo"] == "Revisión por la dirección Q3"

    r = await client.put(f"{BASE}/{minuta['id']}", json={"acuerdos": None, "lugar": "Virtual"}, headers=h)
    assert r.status_code == 200
    data = r.json()["minuta"]
    assert data["lugar"] == "Virtual"
    assert data["acuerdos"] is None
    assert data["titulo"] == "Revisión por la dirección Q3"

    r = await client.delete(f"{BASE}/{minuta['id']}", headers=h)
    assert r.status_code == 403
    r = await client.delete(f"{BASE}/{minuta['id']}", headers=tenant.admin.headers)
    assert r.status_code == 200
    r = await client.get(f"{BASE}/{minuta['id']}", headers=h)
    assert r.status_code == 404
    assert r.json()["detail"] == "Minuta no encontrada"


@pytest.mark.asyncio
async def test_crear_sin_titulo_422(client, tenant):
    r = await client.post(BASE, json={"responsable": "x"}, headers=tenant.user.headers)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_titulo_no_se_puede_vaciar(client, tenant):
    minuta = await _crear(client, tenant.user.headers)
    r = await client.put(f"{BASE}/{minuta['id']}", json={"titulo": None}, headers=tenant.user.headers)
    assert r.status_code == 200
    assert r.json()["minuta"]["titulo"] == minuta["titulo"]


@pytest.mark.asyncio
async def test_duplicar_minuta(client, tenant):
    h = tenant.user.headers
    minuta = await _crear(client, h)
    r = await client.post(f"{BASE}/{minuta['id']}/duplicate", headers=h)
    assert r.status_code == 201
    copia = r.json()["minuta"]
    assert copia["id"] != minuta["id"]
    assert copia["titulo"] == "Revisión por la dirección Q3 (Copia)"
    assert copia["responsable"] == minuta["responsable"]
    assert copia["descripcion"] == minuta["descripcion"]

    r = await client.post(f"{BASE}/{uuid4()}/duplicate", headers=h)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_consultas(client, tenant, other_tenant):
    h = tenant.user.headers
    await _crear(client, h, titulo="Comité de calidad", responsable="Ana Ruiz")
    await _crear(client, h, titulo="Reunión de seguridad", responsable="Pedro Gil", agenda="Simulacro")
    await _crear(client, other_tenant.user.headers, titulo="Comité de calidad")

    r = await client.get(BASE, headers=h)
    assert r.json()["total"] == 2

    r = await client.get(BASE, params={"limit": 1, "offset": 1}, headers=h)
    assert len(r.json()["items"]) == 1
    assert r.json()["total"] == 2

    r = await client.get(f"{BASE}/search", params={"q": "simulacro"}, headers=h)
    assert [m["titulo"] for m in r.json()["items"]] == ["Reunión de seguridad"]

    r = await client.get(f"{BASE}/search", params={"q": " "}, headers=h)
    assert r.status_code == 400
    assert r.json()["detail"] == "Término de búsqueda requerido"

    r = await client.get(f"{BASE}/responsable/ana", headers=h)
    assert [m["responsable"] for m in r.json()["items"]] == ["Ana Ruiz"]

    r = await client.get(f"{BASE}/recent", params={"limit": 1}, headers=h)
    assert len(r.json()["items"]) == 1


@pytest.mark.asyncio
async def test_participantes_y_estadisticas(client, tenant):
    h = tenant.user.headers
    minuta = await _crear(client, h)
    otra = await _crear(client, h, titulo="Otra reunión")
    url = f"{BASE}/{minuta['id']}/participantes"

    r = await client.post(url, json={"personal_id": "per-1"}, headers=h)
    assert r.status_code == 201
    participante = r.json()["participante"]
    assert participante["rol"] == "participante"
    assert participante["asistio"] is False

    r = await client.post(url, json={"personal_id": "per-2", "rol": "moderador", "asistio": True}, headers=h)
    assert r.status_code == 201
    await client.post(f"{BASE}/{otra['id']}/participantes", json={"personal_id": "per-1"}, headers=h)

    r = await client.get(url, headers=h)
    assert [p["rol"] for p in r.json()["items"]] == ["moderador", "participante"]

    r = await client.get(f"{BASE}/stats", headers=h)
    assert r.json() == {"total": 2, "participantes": 3, "documentos": 0, "normas": 0, "este_mes": 2}

    r = await client.delete(f"{url}/{participante['id']}", headers=h)
    assert r.status_code == 200
    r = await client.delete(f"{url}/{participante['id']}", headers=h)
    assert r.status_code == 404
    assert r.json()["detail"] == "Participante no encontrado"

    # los participantes de minutas dadas de baja no cuentan
    await client.delete(f"{BASE}/{otra['id']}", headers=tenant.manager.headers)
    r = await client.get(f"{BASE}/stats", headers=h)
    assert r.json() == {"total": 1, "participantes": 1, "documentos": 0, "normas": 0, "este_mes": 1}


@pytest.mark.asyncio
async def test_minuta_de_otra_organizacion_404(client, tenant, other_tenant):
    minuta = await _crear(client, tenant.user.headers)
    r = await client.get(f"{BASE}/{minuta['id']}", headers=other_tenant.user.headers)
    assert r.status_code == 404
    r = await client.post(
        f"{BASE}/{minuta['id']}/participantes",
        json={"personal_id": "per-1"},
        headers=other_tenant.user.headers,
    )
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_documentos_relacionados(client, tenant):
    h = tenant.user.headers
    minuta = await _crear(client, h)
    url = f"{BASE}/{minuta['id']}/documentos"

    r = await client.post(url, json={"documento_id": "DOC-PR-07"}, headers=h)
    assert r.status_code == 201, r.text
    documento = r.json()["documento"]
    assert documento["tipo_relacion"] == "adjunto"
    assert documento["es_obligatorio"] is False
    assert documento["entidad_tipo"] == "minuta"
    assert documento["entidad_id"] == minuta["id"]

    r = await client.post(
        url,
        json={"documento_id": "DOC-MC-01", "tipo_relacion": "acta", "descripcion": "Acta firmada", "es_obligatorio": True},
        headers=h,
    )
    assert r.status_code == 201

    r = await client.get(url, headers=h)
    assert r.json()["total"] == 2
    assert [d["tipo_relacion"] for d in r.json()["items"]] == ["acta", "adjunto"]

    r = await client.post(url, json={"tipo_relacion": "acta"}, headers=h)
    assert r.status_code == 422

    r = await client.delete(f"{url}/{documento['id']}", headers=h)
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Documento desvinculado exitosamente"}
    r = await client.delete(f"{url}/{documento['id']}", headers=h)
    assert r.status_code == 404
    assert r.json()["detail"] == "Documento no encontrado"

    r = await client.get(url, headers=h)
    assert [d["documento_id"] for d in r.json()["items"]] == ["DOC-MC-01"]


@pytest.mark.asyncio
async def test_normas_relacionadas(client, tenant):
    h = tenant.user.headers
    minuta = await _crear(client, h)
    url = f"{BASE}/{minuta['id']}/normas"

    r = await client.post(url, json={"norma_id": "ISO-9001", "punto_norma": "9.3"}, headers=h)
    assert r.status_code == 201, r.text
    norma = r.json()["norma"]
    assert norma["tipo_relacion"] == "aplica"
    assert norma["nivel_cumplimiento"] == "pendiente"

    r = await client.post(
        url,
        json={
            "norma_id": "ISO-9001",
            "punto_norma": "7.1.5",
            "clausula_descripcion": "Recursos de seguimiento y medición",
            "nivel_cumplimiento": "cumple_parcial",
        },
        headers=h,
    )
    assert r.status_code == 201

    r = await client.get(url, headers=h)
    assert [n["punto_norma"] for n in r.json()["items"]] == ["7.1.5", "9.3"]

    r = await client.post(url, json={"norma_id": "ISO-9001"}, headers=h)
    assert r.status_code == 422
    r = await client.post(url, json={"norma_id": "ISO-9001", "punto_norma": "8.1", "nivel_cumplimiento": "casi"}, headers=h)
    assert r.status_code == 422

    r = await client.delete(f"{url}/{norma['id']}", headers=h)
    assert r.status_code == 200
    r = await client.delete(f"{url}/{norma['id']}", headers=h)
    assert r.status_code == 404
    assert r.json()["detail"] == "Norma no encontrada"


@pytest.mark.asyncio
async def test_estadisticas_cuentan_documentos_y_normas(client, tenant):
    h = tenant.user.headers
    minuta = await _crear(client, h)
    otra = await _crear(client, h, titulo="Otra reunión")

    await client.post(f"{BASE}/{minuta['id']}/documentos", json={"documento_id": "DOC-1"}, headers=h)
    await client.post(f"{BASE}/{otra['id']}/documentos", json={"documento_id": "DOC-2"}, headers=h)
    await client.post(f"{BASE}/{minuta['id']}/normas", json={"norma_id": "ISO-9001", "punto_norma": "9.3"}, headers=h)

    r = await client.get(f"{BASE}/stats", headers=h)
    assert r.json() == {"total": 2, "participantes": 0, "documentos": 2, "normas": 1, "este_mes": 2}

    await client.delete(f"{BASE}/{otra['id']}", headers=tenant.manager.headers)
    r = await client.get(f"{BASE}/stats", headers=h)
    assert r.json() == {"total": 1, "participantes": 0, "documentos": 1, "normas": 1, "este_mes": 1}


@pytest.mark.asyncio
async def test_vinculos_de_minuta_inexistente_o_ajena_404(client, tenant, other_tenant):
    minuta = await _crear(client, tenant.user.headers)
    for recurso, body in (
        ("participantes", {"personal_id": "per-1"}),
        ("documentos", {"documento_id": "DOC-1"}),
        ("normas", {"norma_id": "ISO-9001", "punto_norma": "9.3"}),
    ):
        r = await client.get(f"{BASE}/{uuid4()}/{recurso}", headers=tenant.user.headers)
        assert r.status_code == 404
        assert r.json()["detail"] == "Minuta no encontrada"

        r = await client.post(f"{BASE}/{minuta['id']}/{recurso}", json=body, headers=other_tenant.user.headers)
        assert r.status_code == 404
        r = await client.get(f"{BASE}/{minuta['id']}/{recurso}", headers=other_tenant.user.headers)
        assert r.status_code == 404
