# -*- coding: utf-8 -*-
"""
sgc/shared/middleware/__init__.py
"""

from .exception_handler import JSONExceptionMiddleware, get_request_id
from .request_logging import RequestLoggingMiddleware

__all__ = ["JSONExceptionMiddleware", "RequestLoggingMiddleware", "get_request_id"]
