# -*- coding: utf-8 -*-
"""
sgc/modules/auth/dependencies.py

Dependencias de autenticación JWT y autorización por rol para FastAPI.

Provee:
- CurrentUser: contexto del usuario autenticado (incluye organization_id,
  la clave multi-organización de todas las consultas)
- get_current_user: valida el Bearer token y que el usuario siga activo
- require_roles: fábrica de dependencias por rol (super_admin pasa siempre)

Autor: Equipo SGC
Fecha: 2026-09-16
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable
from uuid import UUID

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from sgc.shared.database import get_db
from sgc.modules.auth.enums import UserRole
from sgc.modules.auth.security import TokenDecodeError, decode_token, oauth2_scheme
from sgc.modules.auth.services import AuthService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    user_id: UUID
    organization_id: UUID
    role: UserRole
    email: str
    name: str

    @property
    def is_super_admin(self) -> bool:
        return self.role == UserRole.SUPER_ADMIN


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"error": "invalid_token", "message": message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> CurrentUser:
    """
    Dependencia de autenticación para endpoints protegidos.

    El rol y la organización se toman de la base de datos (no del token),
    de modo que un cambio de rol o una desactivación aplican de inmediato.

    Raises:
        HTTPException 401: token inválido/expirado o usuario inactivo
    """
    try:
        payload = decode_token(token)
        user_id = UUID(str(payload["sub"]))
    except TokenDecodeError as e:
        raise _unauthorized(str(e)) from e
    except ValueError as e:
        raise _unauthorized("Token con identificador inválido") from e

    user = await AuthService(db).get_active_user(user_id)
    if user is None:
        logger.warning("Token válido para usuario inactivo o inexistente: %s", user_id)
        raise _unauthorized("Usuario inactivo o inexistente")

    return CurrentUser(
        user_id=user.id,
        organization_id=user.organization_id,
        role=UserRole(user.role),
        email=user.email,
        name=user.name,
    )


def require_roles(*roles: UserRole) -> Callable:
    """
    Dependencia que exige alguno de los roles dados.

    Uso:
        @router.delete("/{id}", dependencies=[Depends(require_roles(UserRole.ADMIN))])
    """
    allowed = set(roles)

    async def _checker(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if user.is_super_admin or user.role in allowed:
            return user
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"error": "forbidden", "message": "No tiene permisos para esta operación"},
        )

    return _checker


require_super_admin = require_roles(UserRole.SUPER_ADMIN)
require_manager = require_roles(UserRole.ADMIN, UserRole.MANAGER)


__all__ = [
    "CurrentUser",
    "get_current_user",
    "require_roles",
    "require_super_admin",
    "require_manager",
]
