# -*- coding: utf-8 -*-
"""
sgc/modules/auth/enums/__init__.py

Enums del módulo auth: roles de usuario y planes de organización.

Autor: Equipo SGC
Fecha: 2026-09-16
"""

from enum import StrEnum


class UserRole(StrEnum):
    """
    Roles de usuario.

    - super_admin: administra organizaciones y usuarios de toda la plataforma
    - admin / manager: gestión dentro de su organización
    - employee / user: operación diaria
    """
    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"
    USER = "user"


# Roles que un super admin puede asignar desde la consola
ASSIGNABLE_ROLES = frozenset(
    {UserRole.ADMIN, UserRole.MANAGER, UserRole.EMPLOYEE, UserRole.USER}
)


class OrganizationPlan(StrEnum):
    BASIC = "basic"
    PROFESSIONAL = "professional"
    ENTERPRISE = "enterprise"


__all__ = ["UserRole", "ASSIGNABLE_ROLES", "OrganizationPlan"]
