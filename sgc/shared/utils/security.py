# -*- coding: utf-8 -*-
"""
sgc/shared/utils/security.py

Hasheo y verificación de contraseñas (Argon2id via passlib).

Autor: Equipo SGC
Fecha: 2026-09-15
"""

import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

# Límite máximo para prevenir DoS con payloads gigantes
MAX_PASSWORD_LENGTH = 1024

pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__type="ID",
    argon2__memory_cost=65536,  # 64 MB
    argon2__time_cost=3,
    argon2__parallelism=2,
)


class PasswordTooLongError(ValueError):
    """Contraseña excede el límite máximo permitido."""


def hash_password(password: str) -> str:
    """
    Genera un hash seguro de la contraseña usando Argon2id.

    Raises:
        PasswordTooLongError: Si la contraseña excede MAX_PASSWORD_LENGTH
    """
    if len(password) > MAX_PASSWORD_LENGTH:
        raise PasswordTooLongError(
            f"La contraseña no puede exceder {MAX_PASSWORD_LENGTH} caracteres"
        )
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verifica que la contraseña coincida con el hash almacenado.

    Returns:
        False si la contraseña es demasiado larga o el hash no es válido
    """
    if len(plain_password) > MAX_PASSWORD_LENGTH:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("Hash de contraseña con formato no reconocido")
        return False


__all__ = [
    "MAX_PASSWORD_LENGTH",
    "PasswordTooLongError",
    "hash_password",
    "verify_password",
]
# Fin del archivo sgc/shared/utils/security.py
