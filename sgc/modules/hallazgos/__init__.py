# -*- coding: utf-8 -*-
"""
sgc/modules/hallazgos/__init__.py

Hallazgos (no conformidades, observaciones y oportunidades de mejora) con
su ciclo de vida de tratamiento.
"""
