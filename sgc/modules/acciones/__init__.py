# -*- coding: utf-8 -*-
"""
sgc/modules/acciones/__init__.py

Acciones de mejora asociadas a hallazgos (ciclo P1..P4).
"""
