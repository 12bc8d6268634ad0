# -*- coding: utf-8 -*-
"""
Tests de endpoints /api/capacitaciones (capacitaciones, temas y asistentes).
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from sgc.modules.capacitaciones.facades.errors import CapacitacionValidationError
from sgc.modules.capacitaciones.facades.validaciones import validar_fechas

BASE = "/api/capacitaciones"
_INICIO = datetime(2026, 10, 5, 9, 0, tzinfo=timezone.utc)


def _payload(**overrides):
    data = {
        "nombre": "Inducción ISO 9001:2015",
        "descripcion": "Conceptos básicos del sistema de gestión",
        "instructor": "María Torres",
        "fecha_inicio": _INICIO.isoformat(),
        "fecha_fin": (_INICIO + timedelta(hours=8)).isoformat(),
        "duracion_horas": 8,
        "modalidad": "virtual",
    }
    data.update(overrides)
    return data


async def _crear(client, headers, **overrides):
    r = await client.post(BASE, json=_payload(**overrides), headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["capacitacion"]


def test_validar_fechas():
    validar_fechas(_INICIO, None)
    validar_fechas(_INICIO, _INICIO)
    # naive se asume UTC
    validar_fechas(_INICIO, datetime(2026, 10, 5, 10, 0))
    with pytest.raises(CapacitacionValidationError):
        validar_fechas(_INICIO, _INICIO - timedelta(minutes=1))


@pytest.mark.asyncio
async def test_crear_capacitacion_con_defaults(client, tenant):
    cap = await _crear(client, tenant.user.headers)
    assert cap["estado"] == "programada"
    assert cap["modalidad"] == "virtual"
    assert cap["certificacion"] is False
    assert cap["organizacion_id"] == str(tenant.id)


@pytest.mark.asyncio
async def test_crear_con_fin_anterior_400(client, tenant):
    r = await client.post(
        BASE,
        json=_payload(fecha_fin=(_INICIO - timedelta(days=1)).isoformat()),
        headers=tenant.user.headers,
    )
    assert r.status_code == 400
    assert "fecha de fin" in r.json()["detail"]


@pytest.mark.asyncio
async def test_crear_sin_nombre_422(client, tenant):
    payload = _payload()
    payload.pop("nombre")
    r = await client.post(BASE, json=payload, headers=tenant.user.headers)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_actualizar_valida_contra_fechas_guardadas(client, tenant):
    h = tenant.user.headers
    cap = await _crear(client, h)

    r = await client.put(
        f"{BASE}/{cap['id']}",
        json={"fecha_inicio": (_INICIO + timedelta(days=2)).isoformat()},
        headers=h,
    )
    assert r.status_code == 400

    r = await client.put(f"{BASE}/{cap['id']}", json={"estado": "en_curso", "cupo_maximo": 20}, headers=h)
    assert r.status_code == 200
    assert r.json()["capacitacion"]["estado"] == "en_curso"
    assert r.json()["capacitacion"]["cupo_maximo"] == 20


@pytest.mark.asyncio
async def test_listado_filtros_y_busqueda(client, tenant, other_tenant):
    h = tenant.user.headers
    await _crear(client, h)
    await _crear(client, h, nombre="Primeros auxilios", instructor="Cruz Roja", modalidad="presencial")
    await _crear(client, other_tenant.user.headers)

    r = await client.get(BASE, headers=h)
    assert r.json()["total"] == 2

    r = await client.get(BASE, params={"modalidad": "presencial"}, headers=h)
    assert [c["nombre"] for c in r.json()["items"]] == ["Primeros auxilios"]

    r = await client.get(BASE, params={"busqueda": "cruz"}, headers=h)
    assert r.json()["total"] == 1

    r = await client.get(BASE, params={"limit": 1}, headers=h)
    assert len(r.json()["items"]) == 1
    assert r.json()["total"] == 2


@pytest.mark.asyncio
async def test_eliminar_requiere_manager(client, tenant):
    cap = await _crear(client, tenant.user.headers)
    r = await client.delete(f"{BASE}/{cap['id']}", headers=tenant.employee.headers)
    assert r.status_code == 403
    r = await client.delete(f"{BASE}/{cap['id']}", headers=tenant.manager.headers)
    assert r.status_code == 200
    r = await client.get(f"{BASE}/{cap['id']}", headers=tenant.user.headers)
    assert r.status_code == 404
    assert r.json()["detail"] == "Capacitación no encontrada"


@pytest.mark.asyncio
async def test_capacitacion_de_otra_organizacion_404(client, tenant, other_tenant):
    cap = await _crear(client, tenant.user.headers)
    r = await client.get(f"{BASE}/{cap['id']}", headers=other_tenant.user.headers)
    assert r.status_code == 404
    r = await client.post(
        f"{BASE}/{cap['id']}/asistentes", json={"empleado_id": "emp-1"}, headers=other_tenant.user.headers
    )
    assert r.status_code == 404


# ---------------------------------------------------------------------------
# Temas
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_temas_orden_por_defecto_al_final(client, tenant):
    h = tenant.user.headers
    cap = await _crear(client, h)
    url = f"{BASE}/{cap['id']}/temas"

    r = await client.post(url, json={"titulo": "Contexto de la organización"}, headers=h)
    assert r.status_code == 201
    assert r.json()["tema"]["orden"] == 1

    r = await client.post(url, json={"titulo": "Liderazgo", "orden": 5}, headers=h)
    assert r.json()["tema"]["orden"] == 5

    r = await client.post(url, json={"titulo": "Planificación"}, headers=h)
    assert r.json()["tema"]["orden"] == 6

    r = await client.get(url, headers=h)
    assert [t["titulo"] for t in r.json()["items"]] == [
        "Contexto de la organización",
        "Liderazgo",
        "Planificación",
    ]


@pytest.mark.asyncio
async def test_actualizar_y_eliminar_tema(client, tenant):
    h = tenant.user.headers
    cap = await _crear(client, h)
    url = f"{BASE}/{cap['id']}/temas"
    tema = (await client.post(url, json={"titulo": "Borrador"}, headers=h)).json()["tema"]

    r = await client.put(f"{url}/{tema['id']}", json={"titulo": "Soporte", "orden": 3}, headers=h)
    assert r.status_code == 200
    assert r.json()["tema"]["titulo"] == "Soporte"
    assert r.json()["tema"]["orden"] == 3

    r = await client.delete(f"{url}/{tema['id']}", headers=h)
    assert r.status_code == 200
    r = await client.get(url, headers=h)
    assert r.json()["total"] == 0

    r = await client.put(f"{url}/{tema['id']}", json={"titulo": "x"}, headers=h)
    assert r.status_code == 404
    assert r.json()["detail"] == "Tema no encontrado"


@pytest.mark.asyncio
async def test_tema_de_otra_capacitacion_404(client, tenant):
    h = tenant.user.headers
    a = await _crear(client, h)
    b = await _crear(client, h, nombre="Otra")
    tema = (await client.post(f"{BASE}/{a['id']}/temas", json={"titulo": "T"}, headers=h)).json()["tema"]
    r = await client.put(f"{BASE}/{b['id']}/temas/{tema['id']}", json={"titulo": "x"}, headers=h)
    assert r.status_code == 404


# ---------------------------------------------------------------------------
# Asistentes
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_inscripcion_duplicada_409(client, tenant):
    h = tenant.user.headers
    cap = await _crear(client, h)
    url = f"{BASE}/{cap['id']}/asistentes"

    r = await client.post(url, json={"empleado_id": "emp-7"}, headers=h)
    assert r.status_code == 201
    assert r.json()["asistente"]["estado"] == "inscrito"
    assert r.json()["asistente"]["fecha_inscripcion"]

    r = await client.post(url, json={"empleado_id": "emp-7"}, headers=h)
    assert r.status_code == 409
    assert r.json()["detail"] == "El empleado ya está inscrito en esta capacitación"


@pytest.mark.asyncio
async def test_cupo_cuenta_solo_asistentes_activos(client, tenant):
    h = tenant.user.headers
    cap = await _crear(client, h, cupo_maximo=2)
    url = f"{BASE}/{cap['id']}/asistentes"

    primero = (await client.post(url, json={"empleado_id": "emp-1"}, headers=h)).json()["asistente"]
    await client.post(url, json={"empleado_id": "emp-2"}, headers=h)

    r = await client.post(url, json={"empleado_id": "emp-3"}, headers=h)
    assert r.status_code == 409
    assert "cupo máximo (2" in r.json()["detail"]

    r = await client.delete(f"{url}/{primero['id']}", headers=h)
    assert r.status_code == 200

    r = await client.post(url, json={"empleado_id": "emp-3"}, headers=h)
    assert r.status_code == 201

    r = await client.get(url, headers=h)
    assert sorted(a["empleado_id"] for a in r.json()["items"]) == ["emp-2", "emp-3"]


@pytest.mark.asyncio
async def test_actualizar_asistente(client, tenant):
    h = tenant.user.headers
    cap = await _crear(client, h)
    url = f"{BASE}/{cap['id']}/asistentes"
    asistente = (await client.post(url, json={"empleado_id": "emp-9"}, headers=h)).json()["asistente"]

    r = await client.put(
        f"{url}/{asistente['id']}", json={"estado": "aprobado", "calificacion": 92.5}, headers=h
    )
    assert r.status_code == 200
    assert r.json()["asistente"]["estado"] == "aprobado"
    assert r.json()["asistente"]["calificacion"] == 92.5

    r = await client.put(f"{url}/{asistente['id']}", json={"calificacion": 120}, headers=h)
    assert r.status_code == 422

    r = await client.put(f"{url}/{uuid4()}", json={"estado": "ausente"}, headers=h)
    assert r.status_code == 404
