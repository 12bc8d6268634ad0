# -*- coding: utf-8 -*-
"""
Tests del ciclo de vida de hallazgos (sin base de datos).
"""

from datetime import datetime, timezone

import pytest

from sgc.modules.hallazgos.enums import EstadoHallazgo as E
from sgc.modules.hallazgos.facades.ciclo import (
    prefijo_hallazgo,
    transicion_permitida,
    validar_transicion,
)
from sgc.modules.hallazgos.facades.errors import TransicionInvalida


@pytest.mark.parametrize(
    "actual, nuevo",
    [
        (E.DETECCION, E.PLANIFICACION_AI),
        (E.PLANIFICACION_AI, E.EJECUCION_AI),
        (E.EJECUCION_AI, E.VERIFICACION_CIERRE),
        (E.VERIFICACION_CIERRE, E.FINALIZADO),
        # retroceso de un paso
        (E.EJECUCION_AI, E.PLANIFICACION_AI),
        (E.VERIFICACION_CIERRE, E.EJECUCION_AI),
    ],
)
def test_transiciones_permitidas(actual, nuevo):
    assert transicion_permitida(actual, nuevo)
    validar_transicion(actual, nuevo)


@pytest.mark.parametrize(
    "actual, nuevo",
    [
        (E.DETECCION, E.EJECUCION_AI),
        (E.DETECCION, E.FINALIZADO),
        (E.DETECCION, E.DETECCION),
        (E.FINALIZADO, E.VERIFICACION_CIERRE),
        (E.FINALIZADO, E.FINALIZADO),
    ],
)
def test_transiciones_rechazadas(actual, nuevo):
    assert not transicion_permitida(actual, nuevo)
    with pytest.raises(TransicionInvalida):
        validar_transicion(actual, nuevo)


def test_prefijo_usa_el_anio():
    assert prefijo_hallazgo(datetime(2026, 3, 1, tzinfo=timezone.utc)) == "HAL-2026-"
