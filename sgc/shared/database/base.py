# -*- coding: utf-8 -*-
"""
sgc/shared/database/base.py

Base declarativa, convención de nombres y tipos portables para modelos ORM.

Este módulo proporciona:
- Base: clase base declarativa de SQLAlchemy
- NAMING_CONVENTION: convención de nombres para constraints
- JSONType: JSON portable (JSONB en PostgreSQL)
- as_str_enum: helper para mapear enums Python a columnas VARCHAR validadas

Autor: Equipo SGC
Fecha: 2026-09-14
"""

from __future__ import annotations

from enum import Enum
from typing import Type

from sqlalchemy import JSON, MetaData
from sqlalchemy import Enum as SAEnum
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase

# ===== NAMING CONVENTION =====
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


# ===== BASE DECLARATIVA =====
class Base(DeclarativeBase):
    """
    Base declarativa para todos los modelos ORM del SGC.
    Incluye convención de nombres para constraints.
    """
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# JSONB en PostgreSQL, JSON genérico en el resto (SQLite en pruebas)
JSONType = JSON().with_variant(JSONB(), "postgresql")


def as_str_enum(enum_cls: Type[Enum], length: int = 40) -> SAEnum:
    """
    Devuelve un tipo Enum de SQLAlchemy persistido como VARCHAR.

    Se guarda el `.value` del enum (no el nombre) y no se crea tipo nativo,
    de modo que el esquema es idéntico en PostgreSQL y SQLite.

    Uso típico:

        estado: Mapped[EstadoIndicador] = mapped_column(
            as_str_enum(EstadoIndicador), nullable=False,
        )
    """

    def _values(_: object) -> list[str]:
        return [e.value for e in enum_cls]  # type: ignore[arg-type]

    return SAEnum(
        enum_cls,
        native_enum=False,
        create_constraint=False,
        length=length,
        values_callable=_values,
        validate_strings=True,
    )


__all__ = ["Base", "NAMING_CONVENTION", "JSONType", "as_str_enum"]
# Fin del archivo sgc/shared/database/base.py
