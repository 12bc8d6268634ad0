# -*- coding: utf-8 -*-
"""
sgc/shared

Infraestructura compartida: configuración, base de datos, middleware,
utilidades y scheduler.
"""
