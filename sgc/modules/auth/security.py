# -*- coding: utf-8 -*-
"""
sgc/modules/auth/security.py

Seguridad del módulo auth:
- Esquema OAuth2 (Bearer)
- Creación / decodificación de JWT de acceso y de refresco

Claims emitidos: sub (user id), organization_id, role, type (access|refresh),
iat, exp.

Autor: Equipo SGC
Fecha: 2026-09-16
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, Optional
from uuid import UUID

from fastapi.security import OAuth2PasswordBearer
from jose import ExpiredSignatureError, JWTError, jwt

from sgc.shared.config import get_settings
from sgc.shared.utils.dates import now_utc

TOKEN_TYPE_ACCESS = "access"
TOKEN_TYPE_REFRESH = "refresh"

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


class TokenDecodeError(Exception):
    """Error al decodificar/validar un token JWT."""


def _secret_and_algorithm() -> tuple[str, str]:
    settings = get_settings()
    return settings.jwt_secret_key.get_secret_value(), settings.jwt_algorithm


def _encode(claims: Dict[str, Any], expires_delta: timedelta) -> str:
    secret, algorithm = _secret_and_algorithm()
    now = now_utc()
    to_encode = dict(claims)
    to_encode["iat"] = int(now.timestamp())
    to_encode["exp"] = int((now + expires_delta).timestamp())
    return jwt.encode(to_encode, secret, algorithm=algorithm)


def create_access_token(
    user_id: UUID,
    organization_id: UUID,
    role: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    minutes = get_settings().access_token_expire_minutes
    return _encode(
        {
            "sub": str(user_id),
            "organization_id": str(organization_id),
            "role": str(role),
            "type": TOKEN_TYPE_ACCESS,
        },
        expires_delta or timedelta(minutes=minutes),
    )


def create_refresh_token(user_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
    minutes = get_settings().refresh_token_expire_minutes
    return _encode(
        {"sub": str(user_id), "type": TOKEN_TYPE_REFRESH},
        expires_delta or timedelta(minutes=minutes),
    )


def decode_token(token: str, expected_type: str = TOKEN_TYPE_ACCESS) -> Dict[str, Any]:
    """
    Decodifica y valida un JWT.

    Raises:
        TokenDecodeError: firma inválida, token expirado, sin `sub` o de otro tipo.
    """
    secret, algorithm = _secret_and_algorithm()
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except ExpiredSignatureError as e:
        raise TokenDecodeError("Token expirado") from e
    except JWTError as e:
        raise TokenDecodeError("Token inválido") from e

    if not payload.get("sub"):
        raise TokenDecodeError("Token sin identificador de usuario")
    if payload.get("type") != expected_type:
        raise TokenDecodeError("Tipo de token inválido")
    return payload


__all__ = [
    "oauth2_scheme",
    "TokenDecodeError",
    "TOKEN_TYPE_ACCESS",
    "TOKEN_TYPE_REFRESH",
    "create_access_token",
    "create_refresh_token",
    "decode_token",
]
