# -*- coding: utf-8 -*-
"""
sgc/modules/registros_procesos/__init__.py

Registros de procesos: eventos de proceso (incidentes, no conformidades,
acciones, mejoras...) con ciclo abierto → en progreso → cerrado, acciones,
seguimiento y alertas de vencimiento.
"""
