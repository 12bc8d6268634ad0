# -*- coding: utf-8 -*-
"""
sgc/modules/vinculos/__init__.py

Vínculos de una entidad del SGC (minuta, hallazgo) con personal,
documentos y normas. Cada módulo dueño monta las rutas bajo su prefijo.
"""
