# -*- coding: utf-8 -*-
"""
sgc/modules/models.py

Registro de todos los modelos ORM en Base.metadata.

Importar este módulo basta para que create_all conozca todas las tablas
(init_models y la suite de pruebas lo usan así).

Autor: Equipo SGC
Fecha: 2026-09-23
"""

from sgc.modules.auth.models import AppUser, Organization
from sgc.modules.indicadores.models import Indicador, Medicion
from sgc.modules.registros_procesos.models import RegistroProceso
from sgc.modules.capacitaciones.models import Capacitacion, CapacitacionAsistente, CapacitacionTema
from sgc.modules.auditorias.models import Auditoria, AuditoriaAspecto, AuditoriaRelacion
from sgc.modules.hallazgos.models import Hallazgo
from sgc.modules.acciones.models import Accion
from sgc.modules.minutas.models import Minuta
from sgc.modules.vinculos.models import DocumentoRelacionado, NormaRelacionada, Participante

__all__ = [
    "Organization",
    "AppUser",
    "Indicador",
    "Medicion",
    "RegistroProceso",
    "Capacitacion",
    "CapacitacionTema",
    "CapacitacionAsistente",
    "Auditoria",
    "AuditoriaAspecto",
    "AuditoriaRelacion",
    "Hallazgo",
    "Accion",
    "Minuta",
    "Participante",
    "DocumentoRelacionado",
    "NormaRelacionada",
]
