# -*- coding: utf-8 -*-
"""
Tests de endpoints /api/registros-procesos y del refresco de alertas.
"""

from datetime import datetime, timedelta, timezone

import pytest

from sgc.modules.registros_procesos.services import RegistrosProcesosService

BASE = "/api/registros-procesos"


def _iso(delta_days: float) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=delta_days)).isoformat()


def _payload(**overrides):
    data = {
        "codigo": "reg-001",
        "tipo": "no_conformidad",
        "proceso_id": "proc-compras",
        "departamento_id": "dep-compras",
        "responsable": "Carla Gómez",
        "titulo": "Proveedor sin certificado",
        "descripcion": "El proveedor entregó material sin certificado de calidad",
        "origen": {"tipo": "auditoria", "fuente": "Auditoría interna 2026"},
        "impacto": {"nivel": "alto", "descripcion": "Riesgo de lote no conforme"},
        "acciones": [
            {
                "descripcion": "Solicitar certificado",
                "responsable": "Compras",
                "fecha_inicio": _iso(0),
                "fecha_fin": _iso(5),
            }
        ],
    }
    data.update(overrides)
    return data


async def _crear(client, headers, **overrides):
    r = await client.post(BASE, json=_payload(**overrides), headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["registro"]


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_crear_registro_con_defaults(client, tenant):
    reg = await _crear(client, tenant.user.headers)
    assert reg["codigo"] == "REG-001"
    assert reg["estado"] == "abierto"
    assert reg["prioridad"] == "media"
    assert reg["categoria"] == "calidad"
    assert reg["seguimiento"] == []
    assert reg["cierre"] is None
    assert reg["acciones"][0]["estado"] == "pendiente"
    assert reg["alertas"] == {"generadas": False, "tipo": None, "mensaje": None, "enviada": False}


@pytest.mark.asyncio
async def test_crear_registro_genera_alerta_de_vencimiento(client, tenant):
    reg = await _crear(
        client,
        tenant.user.headers,
        fecha=_iso(-10),
        fecha_vencimiento=_iso(-2),
    )
    assert reg["alertas"]["generadas"] is True
    assert reg["alertas"]["tipo"] == "vencimiento"
    assert "vencido desde hace" in reg["alertas"]["mensaje"]


@pytest.mark.asyncio
async def test_vencimiento_anterior_a_la_fecha_400(client, tenant):
    r = await client.post(
        BASE, json=_payload(fecha=_iso(0), fecha_vencimiento=_iso(-1)), headers=tenant.user.headers
    )
    assert r.status_code == 400
    assert "fecha de vencimiento" in r.json()["detail"]


@pytest.mark.asyncio
async def test_accion_con_fechas_invertidas_400(client, tenant):
    acciones = [
        {"descripcion": "x", "responsable": "y", "fecha_inicio": _iso(3), "fecha_fin": _iso(1)}
    ]
    r = await client.post(BASE, json=_payload(acciones=acciones), headers=tenant.user.headers)
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_codigo_duplicado_409(client, tenant):
    await _crear(client, tenant.user.headers)
    r = await client.post(BASE, json=_payload(), headers=tenant.user.headers)
    assert r.status_code == 409


@pytest.mark.asyncio
async def test_origen_requerido_422(client, tenant):
    payload = _payload()
    payload.pop("origen")
    r = await client.post(BASE, json=payload, headers=tenant.user.headers)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_actualizar_registro_recalcula_alertas(client, tenant):
    h = tenant.user.headers
    reg = await _crear(client, h, prioridad="alta")
    r = await client.put(f"{BASE}/{reg['id']}", json={"fecha_vencimiento": _iso(2.5)}, headers=h)
    assert r.status_code == 200, r.text
    alertas = r.json()["registro"]["alertas"]
    assert alertas["tipo"] == "recordatorio"
    assert alertas["mensaje"] == "Registro de prioridad alta vence en 3 días."

    # quitar la fecha de vencimiento elimina la alerta
    r = await client.put(f"{BASE}/{reg['id']}", json={"fecha_vencimiento": None}, headers=h)
    assert r.json()["registro"]["fecha_vencimiento"] is None
    assert r.json()["registro"]["alertas"]["generadas"] is False


@pytest.mark.asyncio
async def test_eliminar_requiere_manager_y_es_logico(client, tenant):
    reg = await _crear(client, tenant.user.headers)
    r = await client.delete(f"{BASE}/{reg['id']}", headers=tenant.employee.headers)
    assert r.status_code == 403

    r = await client.delete(f"{BASE}/{reg['id']}", headers=tenant.admin.headers)
    assert r.status_code == 200
    r = await client.get(f"{BASE}/{reg['id']}", headers=tenant.admin.headers)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_registro_de_otra_organizacion_404(client, tenant, other_tenant):
    reg = await _crear(client, tenant.user.headers)
    r = await client.get(f"{BASE}/{reg['id']}", headers=other_tenant.user.headers)
    assert r.status_code == 404
    r = await client.post(
        f"{BASE}/{reg['id']}/seguimiento",
        json={"responsable": "x", "comentarios": "y", "progreso": 10},
        headers=other_tenant.user.headers,
    )
    assert r.status_code == 404


# ---------------------------------------------------------------------------
# Ciclo de vida
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_seguimiento_pasa_a_en_progreso(client, tenant):
    h = tenant.user.headers
    reg = await _crear(client, h)
    r = await client.post(
        f"{BASE}/{reg['id']}/seguimiento",
        json={"responsable": "Carla", "comentarios": "Se solicitó el certificado", "progreso": 40},
        headers=h,
    )
    assert r.status_code == 200, r.text
    data = r.json()["registro"]
    assert data["estado"] == "en_progreso"
    assert len(data["seguimiento"]) == 1
    assert data["seguimiento"][0]["progreso"] == 40


@pytest.mark.asyncio
@pytest.mark.parametrize("progreso", [-1, 101])
async def test_seguimiento_con_progreso_fuera_de_rango_400(client, tenant, progreso):
    reg = await _crear(client, tenant.user.headers)
    r = await client.post(
        f"{BASE}/{reg['id']}/seguimiento",
        json={"responsable": "Carla", "comentarios": "x", "progreso": progreso},
        headers=tenant.user.headers,
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "El progreso debe estar entre 0 y 100"


@pytest.mark.asyncio
async def test_cerrar_registro_y_no_permitir_cerrar_dos_veces(client, tenant):
    h = tenant.user.headers
    reg = await _crear(client, h, fecha=_iso(-10), fecha_vencimiento=_iso(-1))
    cierre = {"responsable": "Calidad", "resultado": "exitoso", "comentarios": "Certificado recibido"}

    r = await client.post(f"{BASE}/{reg['id']}/cerrar", json=cierre, headers=h)
    assert r.status_code == 200, r.text
    data = r.json()["registro"]
    assert data["estado"] == "cerrado"
    assert data["cierre"]["resultado"] == "exitoso"
    assert data["cierre"]["fecha"] is not None
    assert data["alertas"]["generadas"] is False

    r = await client.post(f"{BASE}/{reg['id']}/cerrar", json=cierre, headers=h)
    assert r.status_code == 409


@pytest.mark.asyncio
async def test_actualizar_accion_por_indice(client, tenant):
    h = tenant.user.headers
    reg = await _crear(client, h)

    r = await client.put(f"{BASE}/{reg['id']}/acciones/0", json={"estado": "completada"}, headers=h)
    assert r.status_code == 200, r.text
    assert r.json()["registro"]["acciones"][0]["estado"] == "completada"
    assert r.json()["registro"]["acciones"][0]["descripcion"] == "Solicitar certificado"

    r = await client.get(f"{BASE}/{reg['id']}/progreso", headers=h)
    assert r.json()["progreso_general"] == 100

    r = await client.put(f"{BASE}/{reg['id']}/acciones/3", json={"estado": "completada"}, headers=h)
    assert r.status_code == 400
    assert r.json()["detail"] == "Índice de acción inválido"


@pytest.mark.asyncio
async def test_progreso(client, tenant):
    h = tenant.user.headers
    reg = await _crear(client, h, prioridad="critica")
    r = await client.get(f"{BASE}/{reg['id']}/progreso", headers=h)
    assert r.status_code == 200
    assert r.json() == {
        "progreso_general": 0,
        "dias_restantes": None,
        "esta_vencido": False,
        "necesita_atencion": True,
    }


# ---------------------------------------------------------------------------
# Consultas
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_listado_ordenado_por_prioridad(client, tenant):
    h = tenant.user.headers
    await _crear(client, h, codigo="R-BAJA", prioridad="baja")
    await _crear(client, h, codigo="R-CRIT", prioridad="critica")
    await _crear(client, h, codigo="R-MEDIA", prioridad="media", proceso_id="proc-ventas")

    r = await client.get(BASE, headers=h)
    assert [i["codigo"] for i in r.json()["items"]] == ["R-CRIT", "R-MEDIA", "R-BAJA"]

    r = await client.get(f"{BASE}/proceso/proc-ventas", headers=h)
    assert [i["codigo"] for i in r.json()["items"]] == ["R-MEDIA"]

    r = await client.get(f"{BASE}/departamento/dep-compras", headers=h)
    assert r.json()["total"] == 3

    r = await client.get(f"{BASE}/responsable/Carla Gómez", headers=h)
    assert r.json()["total"] == 3

    r = await client.get(BASE, params={"prioridad": "baja"}, headers=h)
    assert [i["codigo"] for i in r.json()["items"]] == ["R-BAJA"]

    r = await client.get(BASE, params={"busqueda": "crit"}, headers=h)
    assert [i["codigo"] for i in r.json()["items"]] == ["R-CRIT"]


@pytest.mark.asyncio
async def test_vencidos_con_alertas_y_estadisticas(client, tenant):
    h = tenant.user.headers
    vencido = await _crear(client, h, codigo="R-1", fecha=_iso(-10), fecha_vencimiento=_iso(-2))
    await _crear(client, h, codigo="R-2", fecha_vencimiento=_iso(30))

    r = await client.get(f"{BASE}/vencidos", headers=h)
    assert [i["id"] for i in r.json()["items"]] == [vencido["id"]]

    r = await client.get(BASE, params={"vencido": "true"}, headers=h)
    assert r.json()["total"] == 1

    r = await client.get(f"{BASE}/con-alertas", headers=h)
    assert [i["id"] for i in r.json()["items"]] == [vencido["id"]]

    r = await client.get(f"{BASE}/necesitan-atencion", headers=h)
    assert [i["id"] for i in r.json()["items"]] == [vencido["id"]]

    r = await client.get(f"{BASE}/estadisticas", headers=h)
    stats = r.json()
    assert stats["total"] == 2
    assert stats["vencidos"] == 1
    assert stats["con_alertas"] == 1
    assert stats["por_tipo"]["no_conformidad"] == 2
    assert stats["por_estado"]["abierto"] == 2
    assert stats["por_prioridad"]["media"] == 2


# ---------------------------------------------------------------------------
# Refresco de alertas (job)
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_refrescar_alertas_marca_vencidos(client, tenant, other_tenant, db):
    await _crear(client, tenant.user.headers, codigo="R-1", fecha=_iso(-10), fecha_vencimiento=_iso(-2))
    await _crear(client, tenant.user.headers, codigo="R-2")
    otro = await _crear(client, other_tenant.user.headers, codigo="R-3", fecha=_iso(-5), fecha_vencimiento=_iso(-1))

    resumen = await RegistrosProcesosService(db).refrescar_alertas(tenant.id)
    assert resumen == {"revisados": 2, "vencidos": 1, "alertas_actualizadas": 0}

    r = await client.get(BASE, params={"estado": "vencido"}, headers=tenant.user.headers)
    assert [i["codigo"] for i in r.json()["items"]] == ["R-1"]

    # la otra organización no se tocó
    r = await client.get(f"{BASE}/{otro['id']}", headers=other_tenant.user.headers)
    assert r.json()["estado"] == "abierto"

    # sin organización recorre todas
    resumen = await RegistrosProcesosService(db).refrescar_alertas()
    assert resumen["vencidos"] == 1
    assert resumen["revisados"] == 3


@pytest.mark.asyncio
async def test_vencidos_por_el_job_siguen_necesitando_atencion(client, tenant, db):
    h = tenant.user.headers
    reg = await _crear(client, h, codigo="R-1", fecha=_iso(-10), fecha_vencimiento=_iso(-2))

    await RegistrosProcesosService(db).refrescar_alertas(tenant.id)

    r = await client.get(f"{BASE}/{reg['id']}/progreso", headers=h)
    assert r.json()["necesita_atencion"] is True

    r = await client.get(f"{BASE}/necesitan-atencion", headers=h)
    assert [i["id"] for i in r.json()["items"]] == [reg["id"]]
    assert r.json()["items"][0]["estado"] == "vencido"


@pytest.mark.asyncio
async def test_listado_por_rango_de_fechas(client, tenant):
    h = tenant.user.headers
    await _crear(client, h, codigo="R-VIEJO", fecha=_iso(-20))
    await _crear(client, h, codigo="R-MEDIO", fecha=_iso(-7))
    await _crear(client, h, codigo="R-NUEVO", fecha=_iso(-1))

    r = await client.get(BASE, params={"fecha_inicio": _iso(-10), "fecha_fin": _iso(-3)}, headers=h)
    assert [i["codigo"] for i in r.json()["items"]] == ["R-MEDIO"]

    r = await client.get(BASE, params={"fecha_inicio": _iso(-10)}, headers=h)
    assert {i["codigo"] for i in r.json()["items"]} == {"R-MEDIO", "R-NUEVO"}

    r = await client.get(BASE, params={"fecha_fin": _iso(-10)}, headers=h)
    assert r.json()["total"] == 1
