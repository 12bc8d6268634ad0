# -*- coding: utf-8 -*-
"""
Tests de endpoints /api/indicadores.

Cubre:
- CRUD con validaciones de negocio (400), esquema (422) y código duplicado (409)
- Filtros y consultas por segmento fijo
- Cambios de estado (activar/desactivar/suspender)
- Mediciones, evaluación y tendencia
- Aislamiento entre organizaciones y permisos de borrado
"""

from datetime import datetime, timedelta, timezone

import pytest

BASE = "/api/indicadores"


def _payload(**overrides):
    inicio = datetime.now(timezone.utc) - timedelta(days=90)
    data = {
        "codigo": "ind-001",
        "nombre": "Satisfacción del cliente",
        "descripcion": "Encuesta trimestral",
        "tipo": "satisfaccion",
        "categoria": "calidad",
        "departamento_id": "dep-ventas",
        "proceso_id": "proc-comercial",
        "objetivo_id": "obj-2026",
        "responsable": "Ana Pérez",
        "unidad": "%",
        "frecuencia": "mensual",
        "meta": {"tipo": "mayor_que", "valor": 85},
        "umbrales": {"critico": 60, "advertencia": 75, "satisfactorio": 85},
        "periodicidad": {"inicio": inicio.isoformat(), "activo": True},
    }
    data.update(overrides)
    return data


async def _crear(client, headers, **overrides):
    r = await client.post(BASE, json=_payload(**overrides), headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["indicador"]


# ---------------------------------------------------------------------------
# Autenticación
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_sin_token_responde_401(client):
    r = await client.get(BASE)
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_token_invalido_responde_401_con_detalle(client):
    r = await client.get(BASE, headers={"Authorization": "Bearer no-es-un-jwt"})
    assert r.status_code == 401
    assert r.json()["detail"]["error"] == "invalid_token"


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_crear_indicador_normaliza_codigo_y_defaults(client, tenant):
    r = await client.post(BASE, json=_payload(), headers=tenant.user.headers)
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["success"] is True
    ind = body["indicador"]
    assert ind["codigo"] == "IND-001"
    assert ind["organizacion_id"] == str(tenant.id)
    assert ind["estado"] == "activo"
    assert ind["tendencia"]["direccion"] == "estable"
    assert ind["tendencia"]["periodo"] == 30
    assert ind["alertas"]["habilitadas"] is False
    assert ind["periodicidad"]["activo"] is True


@pytest.mark.asyncio
async def test_crear_indicador_codigo_duplicado_409(client, tenant):
    await _crear(client, tenant.user.headers)
    r = await client.post(BASE, json=_payload(codigo="IND-001"), headers=tenant.user.headers)
    assert r.status_code == 409
    assert "IND-001" in r.json()["detail"]


@pytest.mark.asyncio
async def test_mismo_codigo_en_otra_organizacion_permitido(client, tenant, other_tenant):
    await _crear(client, tenant.user.headers)
    r = await client.post(BASE, json=_payload(), headers=other_tenant.user.headers)
    assert r.status_code == 201


@pytest.mark.asyncio
async def test_crear_indicador_umbrales_desordenados_400(client, tenant):
    payload = _payload(umbrales={"critico": 90, "advertencia": 75, "satisfactorio": 85})
    r = await client.post(BASE, json=payload, headers=tenant.user.headers)
    assert r.status_code == 400
    assert "umbrales" in r.json()["detail"]


@pytest.mark.asyncio
async def test_crear_indicador_periodicidad_invalida_400(client, tenant):
    inicio = datetime(2026, 6, 1, tzinfo=timezone.utc)
    payload = _payload(periodicidad={"inicio": inicio.isoformat(), "fin": inicio.isoformat()})
    r = await client.post(BASE, json=payload, headers=tenant.user.headers)
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_crear_indicador_campos_faltantes_422(client, tenant):
    payload = _payload()
    payload.pop("umbrales")
    r = await client.post(BASE, json=payload, headers=tenant.user.headers)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_crear_indicador_enum_invalido_422(client, tenant):
    r = await client.post(BASE, json=_payload(frecuencia="quincenal"), headers=tenant.user.headers)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_obtener_y_actualizar_indicador(client, tenant):
    ind = await _crear(client, tenant.user.headers)

    r = await client.get(f"{BASE}/{ind['id']}", headers=tenant.user.headers)
    assert r.status_code == 200
    assert r.json()["nombre"] == "Satisfacción del cliente"

    r = await client.put(
        f"{BASE}/{ind['id']}",
        json={"nombre": "Satisfacción global", "umbrales": {"critico": 50, "advertencia": 70, "satisfactorio": 80}},
        headers=tenant.user.headers,
    )
    assert r.status_code == 200, r.text
    actualizado = r.json()["indicador"]
    assert actualizado["nombre"] == "Satisfacción global"
    assert actualizado["umbrales"]["satisfactorio"] == 80
    assert actualizado["codigo"] == "IND-001"


@pytest.mark.asyncio
async def test_actualizar_umbrales_invalidos_400(client, tenant):
    ind = await _crear(client, tenant.user.headers)
    r = await client.put(
        f"{BASE}/{ind['id']}",
        json={"umbrales": {"critico": 80, "advertencia": 70, "satisfactorio": 90}},
        headers=tenant.user.headers,
    )
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_actualizar_a_codigo_existente_409(client, tenant):
    await _crear(client, tenant.user.headers, codigo="IND-001")
    otro = await _crear(client, tenant.user.headers, codigo="IND-002")
    r = await client.put(f"{BASE}/{otro['id']}", json={"codigo": "ind-001"}, headers=tenant.user.headers)
    assert r.status_code == 409


@pytest.mark.asyncio
async def test_indicador_inexistente_404(client, tenant):
    r = await client.get(f"{BASE}/00000000-0000-0000-0000-000000000000", headers=tenant.user.headers)
    assert r.status_code == 404
    assert r.json()["detail"] == "Indicador no encontrado"


@pytest.mark.asyncio
async def test_id_malformado_422(client, tenant):
    r = await client.get(f"{BASE}/no-es-uuid", headers=tenant.user.headers)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_eliminar_requiere_manager(client, tenant):
    ind = await _crear(client, tenant.user.headers)

    r = await client.delete(f"{BASE}/{ind['id']}", headers=tenant.user.headers)
    assert r.status_code == 403
    assert r.json()["detail"]["error"] == "forbidden"

    r = await client.delete(f"{BASE}/{ind['id']}", headers=tenant.manager.headers)
    assert r.status_code == 200
    assert r.json()["success"] is True

    # baja lógica: deja de ser visible
    r = await client.get(f"{BASE}/{ind['id']}", headers=tenant.user.headers)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_codigo_de_indicador_eliminado_sigue_reservado(client, tenant):
    ind = await _crear(client, tenant.user.headers)
    await client.delete(f"{BASE}/{ind['id']}", headers=tenant.admin.headers)
    r = await client.post(BASE, json=_payload(), headers=tenant.user.headers)
    assert r.status_code == 409


@pytest.mark.asyncio
async def test_otra_organizacion_no_ve_el_indicador(client, tenant, other_tenant):
    ind = await _crear(client, tenant.user.headers)

    r = await client.get(f"{BASE}/{ind['id']}", headers=other_tenant.admin.headers)
    assert r.status_code == 404
    r = await client.put(f"{BASE}/{ind['id']}", json={"nombre": "x"}, headers=other_tenant.admin.headers)
    assert r.status_code == 404
    r = await client.get(BASE, headers=other_tenant.admin.headers)
    assert r.json()["total"] == 0


# ---------------------------------------------------------------------------
# Consultas
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_listado_con_filtros_y_busqueda(client, tenant):
    h = tenant.user.headers
    await _crear(client, h, codigo="A-1", nombre="Entregas a tiempo", tipo="eficiencia", categoria="operacional")
    await _crear(client, h, codigo="A-2", nombre="Reclamos", tipo="conformidad", departamento_id="dep-calidad")
    await _crear(client, h, codigo="A-3", nombre="Accidentes", categoria="seguridad", responsable="Luis")

    r = await client.get(BASE, headers=h)
    body = r.json()
    assert body["total"] == 3
    # orden por nombre
    assert [i["nombre"] for i in body["items"]] == ["Accidentes", "Entregas a tiempo", "Reclamos"]

    r = await client.get(BASE, params={"tipo": "eficiencia"}, headers=h)
    assert [i["codigo"] for i in r.json()["items"]] == ["A-1"]

    r = await client.get(BASE, params={"busqueda": "reclam"}, headers=h)
    assert [i["codigo"] for i in r.json()["items"]] == ["A-2"]

    r = await client.get(f"{BASE}/departamento/dep-calidad", headers=h)
    assert [i["codigo"] for i in r.json()["items"]] == ["A-2"]

    r = await client.get(f"{BASE}/categoria/seguridad", headers=h)
    assert [i["codigo"] for i in r.json()["items"]] == ["A-3"]

    r = await client.get(f"{BASE}/responsable/Luis", headers=h)
    assert [i["codigo"] for i in r.json()["items"]] == ["A-3"]

    r = await client.get(f"{BASE}/tipo/conformidad", headers=h)
    assert r.json()["total"] == 1

    r = await client.get(f"{BASE}/proceso/proc-comercial", headers=h)
    assert r.json()["total"] == 3

    r = await client.get(f"{BASE}/objetivo/obj-2026", headers=h)
    assert r.json()["total"] == 3


@pytest.mark.asyncio
async def test_listado_paginado(client, tenant):
    h = tenant.user.headers
    for i in range(3):
        await _crear(client, h, codigo=f"P-{i}", nombre=f"Indicador {i}")
    r = await client.get(BASE, params={"limit": 2, "offset": 0}, headers=h)
    body = r.json()
    assert len(body["items"]) == 2
    assert body["total"] == 3


@pytest.mark.asyncio
async def test_estado_filtro_invalido_422(client, tenant):
    r = await client.get(f"{BASE}/estado/borrado", headers=tenant.user.headers)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_activos_excluye_suspendidos_y_futuros(client, tenant):
    h = tenant.user.headers
    vigente = await _crear(client, h, codigo="V-1")
    suspendido = await _crear(client, h, codigo="V-2")
    futuro_inicio = (datetime.now(timezone.utc) + timedelta(days=10)).isoformat()
    await _crear(client, h, codigo="V-3", periodicidad={"inicio": futuro_inicio})

    r = await client.post(f"{BASE}/{suspendido['id']}/suspender", json={"motivo": "Revisión"}, headers=h)
    assert r.status_code == 200

    r = await client.get(f"{BASE}/activos", headers=h)
    assert [i["id"] for i in r.json()["items"]] == [vigente["id"]]

    r = await client.get(BASE, params={"activo": "false"}, headers=h)
    assert {i["codigo"] for i in r.json()["items"]} == {"V-2", "V-3"}


@pytest.mark.asyncio
async def test_estadisticas(client, tenant):
    h = tenant.user.headers
    await _crear(client, h, codigo="E-1", tipo="eficiencia")
    segundo = await _crear(client, h, codigo="E-2", tipo="eficiencia", categoria="financiero")
    await client.post(f"{BASE}/{segundo['id']}/desactivar", headers=h)

    r = await client.get(f"{BASE}/estadisticas", headers=h)
    assert r.status_code == 200
    stats = r.json()
    assert stats["total"] == 2
    assert stats["activos"] == 1
    assert stats["por_tipo"]["eficiencia"] == 2
    assert stats["por_tipo"]["mejora"] == 0
    assert stats["por_estado"] == {"activo": 1, "inactivo": 1, "suspendido": 0}
    assert stats["por_categoria"]["financiero"] == 1


# ---------------------------------------------------------------------------
# Estados
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_suspender_activar_y_desactivar(client, tenant):
    h = tenant.user.headers
    ind = await _crear(client, h)

    r = await client.post(f"{BASE}/{ind['id']}/suspender", json={"motivo": "Auditoría externa"}, headers=h)
    data = r.json()["indicador"]
    assert data["estado"] == "suspendido"
    assert data["motivo_suspension"] == "Auditoría externa"
    assert data["periodicidad"]["activo"] is False

    r = await client.post(f"{BASE}/{ind['id']}/activar", headers=h)
    data = r.json()["indicador"]
    assert data["estado"] == "activo"
    assert data["motivo_suspension"] is None
    assert data["periodicidad"]["activo"] is True

    r = await client.post(f"{BASE}/{ind['id']}/desactivar", headers=h)
    assert r.json()["indicador"]["estado"] == "inactivo"


@pytest.mark.asyncio
async def test_suspender_sin_motivo_422(client, tenant):
    ind = await _crear(client, tenant.user.headers)
    r = await client.post(f"{BASE}/{ind['id']}/suspender", json={}, headers=tenant.user.headers)
    assert r.status_code == 422


# ---------------------------------------------------------------------------
# Mediciones, evaluación y tendencia
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_registrar_medicion_evalua_estado_y_meta(client, tenant):
    h = tenant.user.headers
    ind = await _crear(client, h)

    r = await client.post(f"{BASE}/{ind['id']}/mediciones", json={"valor": 90}, headers=h)
    assert r.status_code == 201, r.text
    med = r.json()["medicion"]
    assert med["estado"] == "satisfactorio"
    assert med["cumple_meta"] is True
    assert med["registrado_por"] == str(tenant.user.id)

    r = await client.post(f"{BASE}/{ind['id']}/mediciones", json={"valor": 55}, headers=h)
    med = r.json()["medicion"]
    assert med["estado"] == "critico"
    assert med["cumple_meta"] is False


@pytest.mark.asyncio
async def test_listar_mediciones_mas_recientes_primero(client, tenant):
    h = tenant.user.headers
    ind = await _crear(client, h)
    base = datetime.now(timezone.utc) - timedelta(days=10)
    for i, valor in enumerate((70, 80, 90)):
        fecha = (base + timedelta(days=i)).isoformat()
        await client.post(f"{BASE}/{ind['id']}/mediciones", json={"valor": valor, "fecha": fecha}, headers=h)

    r = await client.get(f"{BASE}/{ind['id']}/mediciones", headers=h)
    body = r.json()
    assert body["total"] == 3
    assert [m["valor"] for m in body["items"]] == [90, 80, 70]


@pytest.mark.asyncio
async def test_evaluar_valor_sin_persistir(client, tenant):
    h = tenant.user.headers
    ind = await _crear(client, h)
    r = await client.get(f"{BASE}/{ind['id']}/evaluar", params={"valor": 80}, headers=h)
    assert r.status_code == 200
    assert r.json() == {"valor": 80.0, "estado": "regular", "cumple_meta": False}

    r = await client.get(f"{BASE}/{ind['id']}/mediciones", headers=h)
    assert r.json()["total"] == 0


@pytest.mark.asyncio
async def test_tendencia_con_mediciones_registradas(client, tenant):
    h = tenant.user.headers
    ind = await _crear(client, h)
    base = datetime.now(timezone.utc) - timedelta(days=5)
    await client.post(f"{BASE}/{ind['id']}/mediciones", json={"valor": 80, "fecha": base.isoformat()}, headers=h)
    await client.post(
        f"{BASE}/{ind['id']}/mediciones",
        json={"valor": 60, "fecha": (base + timedelta(days=2)).isoformat()},
        headers=h,
    )

    r = await client.post(f"{BASE}/{ind['id']}/tendencia", json={}, headers=h)
    assert r.status_code == 200, r.text
    tendencia = r.json()["indicador"]["tendencia"]
    assert tendencia["direccion"] == "descendente"
    assert tendencia["valor"] == 25.0


@pytest.mark.asyncio
async def test_tendencia_con_puntos_explicitos(client, tenant):
    h = tenant.user.headers
    ind = await _crear(client, h)
    t0 = datetime(2026, 1, 1, tzinfo=timezone.utc)
    puntos = [
        {"valor": 100, "fecha": t0.isoformat()},
        {"valor": 130, "fecha": (t0 + timedelta(days=30)).isoformat()},
    ]
    r = await client.post(f"{BASE}/{ind['id']}/tendencia", json={"mediciones": puntos}, headers=h)
    assert r.json()["indicador"]["tendencia"]["direccion"] == "ascendente"
    assert r.json()["indicador"]["tendencia"]["valor"] == 30.0


@pytest.mark.asyncio
async def test_tendencia_sin_mediciones_suficientes_400(client, tenant):
    h = tenant.user.headers
    ind = await _crear(client, h)
    await client.post(f"{BASE}/{ind['id']}/mediciones", json={"valor": 80}, headers=h)
    r = await client.post(f"{BASE}/{ind['id']}/tendencia", json={}, headers=h)
    assert r.status_code == 400
    assert "al menos 2 mediciones" in r.json()["detail"]


@pytest.mark.asyncio
async def test_necesitan_medicion(client, tenant):
    h = tenant.user.headers
    # mensual con inicio hace 90 días y sin mediciones: requiere medición
    pendiente = await _crear(client, h, codigo="N-1")
    # con medición reciente: no requiere
    al_dia = await _crear(client, h, codigo="N-2")
    await client.post(f"{BASE}/{al_dia['id']}/mediciones", json={"valor": 88}, headers=h)

    r = await client.get(f"{BASE}/necesitan-medicion", headers=h)
    assert r.status_code == 200
    assert [i["id"] for i in r.json()["items"]] == [pendiente["id"]]


@pytest.mark.asyncio
async def test_medicion_en_indicador_de_otra_organizacion_404(client, tenant, other_tenant):
    ind = await _crear(client, tenant.user.headers)
    r = await client.post(
        f"{BASE}/{ind['id']}/mediciones", json={"valor": 1}, headers=other_tenant.user.headers
    )
    assert r.status_code == 404
