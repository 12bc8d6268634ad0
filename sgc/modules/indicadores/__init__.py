# -*- coding: utf-8 -*-
"""
sgc/modules/indicadores

Indicadores de calidad: metas, umbrales, mediciones y tendencia.
"""
