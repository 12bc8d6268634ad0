# -*- coding: utf-8 -*-
"""
sgc/shared/utils/__init__.py
"""
