# -*- coding: utf-8 -*-
"""
sgc/modules/auth/facades/plans.py

Configuración derivada del plan de una organización: límite de usuarios y
módulos habilitados.

Autor: Equipo SGC
Fecha: 2026-09-16
"""

from typing import Any, Dict, List

from sgc.modules.auth.enums import OrganizationPlan

MAX_USERS_BY_PLAN: Dict[OrganizationPlan, int] = {
    OrganizationPlan.BASIC: 10,
    OrganizationPlan.PROFESSIONAL: 100,
    OrganizationPlan.ENTERPRISE: 1000,
}

_BASIC_FEATURES = ["documentos", "procesos", "personal"]
_PROFESSIONAL_FEATURES = _BASIC_FEATURES + ["auditorias", "indicadores", "capacitaciones"]
_ENTERPRISE_FEATURES = _PROFESSIONAL_FEATURES + ["crm", "analytics", "api"]

FEATURES_BY_PLAN: Dict[OrganizationPlan, List[str]] = {
    OrganizationPlan.BASIC: _BASIC_FEATURES,
    OrganizationPlan.PROFESSIONAL: _PROFESSIONAL_FEATURES,
    OrganizationPlan.ENTERPRISE: _ENTERPRISE_FEATURES,
}


def get_features_by_plan(plan: OrganizationPlan) -> List[str]:
    return list(FEATURES_BY_PLAN.get(plan, _BASIC_FEATURES))


def build_plan_settings(plan: OrganizationPlan) -> Dict[str, Any]:
    """Settings de organización para un plan: {"max_users", "features"}."""
    return {
        "max_users": MAX_USERS_BY_PLAN.get(plan, MAX_USERS_BY_PLAN[OrganizationPlan.BASIC]),
        "features": get_features_by_plan(plan),
    }


__all__ = ["MAX_USERS_BY_PLAN", "FEATURES_BY_PLAN", "get_features_by_plan", "build_plan_settings"]
