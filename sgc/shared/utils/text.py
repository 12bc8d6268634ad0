# -*- coding: utf-8 -*-
"""
sgc/shared/utils/text.py

Normalización de códigos y términos de búsqueda.
"""

from typing import Optional


def normalize_codigo(value: str) -> str:
    """Códigos de negocio: sin espacios laterales y en mayúsculas."""
    return value.strip().upper()


def like_pattern(term: Optional[str], *, contains: bool = True) -> Optional[str]:
    """
    Patrón LIKE/ILIKE con comodines escapados; None si el término está vacío.

    contains=True busca por subcadena; False, por prefijo.
    Usar siempre con escape="\\\\" en la expresión SQL.
    """
    if term is None:
        return None
    term = term.strip()
    if not term:
        return None
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%" if contains else f"{escaped}%"


__all__ = ["normalize_codigo", "like_pattern"]
