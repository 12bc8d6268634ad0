# -*- coding: utf-8 -*-
"""
sgc/shared/utils/json_response.py

Respuestas JSON con charset UTF-8 explícito.

Uso como default_response_class en FastAPI, para que los mensajes en
español ("código", "auditoría") no lleguen con mojibake a clientes que
no asumen UTF-8:

    app = FastAPI(default_response_class=UTF8JSONResponse)
"""

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSONResponse con Content-Type: application/json; charset=utf-8."""
    media_type = "application/json; charset=utf-8"


__all__ = ["UTF8JSONResponse"]
