# -*- coding: utf-8 -*-
"""
sgc/modules/minutas/__init__.py

Minutas de reunión.
"""
