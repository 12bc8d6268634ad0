# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/enums/__init__.py

Enums del módulo de registros de procesos.

Autor: Equipo SGC
Fecha: 2026-09-18
"""

from enum import StrEnum

from sgc.shared.enums import Prioridad


class TipoRegistro(StrEnum):
    ACTIVIDAD = "actividad"
    INCIDENTE = "incidente"
    NO_CONFORMIDAD = "no_conformidad"
    ACCION_CORRECTIVA = "accion_correctiva"
    ACCION_PREVENTIVA = "accion_preventiva"
    MEJORA = "mejora"
    AUDITORIA = "auditoria"
    REVISION = "revision"


class EstadoRegistro(StrEnum):
    ABIERTO = "abierto"
    EN_PROGRESO = "en_progreso"
    CERRADO = "cerrado"
    CANCELADO = "cancelado"
    VENCIDO = "vencido"


# Estados que ya no admiten cambios de ciclo
ESTADOS_FINALES = frozenset({EstadoRegistro.CERRADO.value, EstadoRegistro.CANCELADO.value})


class CategoriaRegistro(StrEnum):
    CALIDAD = "calidad"
    AMBIENTAL = "ambiental"
    SEGURIDAD = "seguridad"
    OPERACIONAL = "operacional"
    FINANCIERO = "financiero"


class TipoOrigen(StrEnum):
    INTERNO = "interno"
    EXTERNO = "externo"
    AUDITORIA = "auditoria"
    REVISION = "revision"
    QUEJA = "queja"
    SUGERENCIA = "sugerencia"


class NivelImpacto(StrEnum):
    BAJO = "bajo"
    MEDIO = "medio"
    ALTO = "alto"
    CRITICO = "critico"


class EstadoAccion(StrEnum):
    PENDIENTE = "pendiente"
    EN_PROGRESO = "en_progreso"
    COMPLETADA = "completada"
    CANCELADA = "cancelada"


class ResultadoCierre(StrEnum):
    EXITOSO = "exitoso"
    PARCIAL = "parcial"
    NO_EXITOSO = "no_exitoso"


class TipoAlerta(StrEnum):
    VENCIMIENTO = "vencimiento"
    ESCALACION = "escalacion"
    RECORDATORIO = "recordatorio"


__all__ = [
    "Prioridad",
    "TipoRegistro",
    "EstadoRegistro",
    "ESTADOS_FINALES",
    "CategoriaRegistro",
    "TipoOrigen",
    "NivelImpacto",
    "EstadoAccion",
    "ResultadoCierre",
    "TipoAlerta",
]
