# -*- coding: utf-8 -*-
"""
sgc/modules/super_admin/__init__.py

Consola de super administración: organizaciones y usuarios de toda la
plataforma.
"""
