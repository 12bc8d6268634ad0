# -*- coding: utf-8 -*-
"""
sgc/modules/auth

Organizaciones (tenants), usuarios, tokens JWT y dependencias de
autenticación/autorización.
"""
