# -*- coding: utf-8 -*-
"""
sgc/modules/capacitaciones/__init__.py

Capacitaciones con sus temas y asistentes.
"""
