# -*- coding: utf-8 -*-
"""
sgc/modules/auth/facades/errors.py

Excepciones de dominio del módulo auth y de la consola de super admin.

Autor: Equipo SGC
Fecha: 2026-09-16
"""


class InvalidCredentials(Exception):
    """Email inexistente, contraseña incorrecta o usuario inactivo en login."""
    def __init__(self):
        super().__init__("Credenciales inválidas")


class UserAlreadyExists(Exception):
    def __init__(self, email: str, message: str = "El usuario ya existe"):
        self.email = email
        super().__init__(message)


class UserNotFound(Exception):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"Usuario no encontrado: {identifier}")


class OrganizationNotFound(Exception):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"Organización no encontrada: {identifier}")


class OrganizationAlreadyExists(Exception):
    def __init__(self, name: str):
        self.name = name
        super().__init__("Ya existe una organización con ese nombre")


class UserLimitReached(Exception):
    """La organización alcanzó el máximo de usuarios activos de su plan."""
    def __init__(self, max_users: int):
        self.max_users = max_users
        super().__init__(f"La organización alcanzó el límite de {max_users} usuarios de su plan")


class InvalidRole(Exception):
    def __init__(self, role):
        self.role = role
        super().__init__("Rol inválido")


class InvalidToken(Exception):
    def __init__(self, message: str = "Token inválido"):
        super().__init__(message)


__all__ = [
    "InvalidCredentials",
    "UserAlreadyExists",
    "UserNotFound",
    "OrganizationNotFound",
    "OrganizationAlreadyExists",
    "UserLimitReached",
    "InvalidRole",
    "InvalidToken",
]
