# -*- coding: utf-8 -*-
"""
sgc/modules/auditorias/__init__.py

Auditorías internas: programa, aspectos evaluados por proceso y relaciones
con otras entidades del SGC.
"""
