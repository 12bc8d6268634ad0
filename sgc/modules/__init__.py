# -*- coding: utf-8 -*-
"""
sgc/modules

Módulos de negocio del SGC. Cada módulo sigue la misma estructura:
models / schemas / enums / facades / services / routes.
"""
