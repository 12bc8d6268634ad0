# -*- coding: utf-8 -*-
"""
sgc/shared/database/repository.py

Repositorio base async para entidades multi-organización.

Todas las consultas filtran por `organizacion_id` y, salvo indicación,
solo por registros activos (`is_active = true`).

Autor: Equipo SGC
Fecha: 2026-09-15
"""

from enum import Enum
from typing import Any, Dict, Generic, Iterable, Optional, Sequence, Tuple, Type, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")  # modelo ORM


class TenantRepository(Generic[T]):
    """Operaciones comunes sobre un modelo con columnas organizacion_id / is_active."""

    def __init__(self, model: Type[T]):
        self.model = model

    def _scoped(self, organizacion_id: UUID, *, only_active: bool = True):
        stmt = select(self.model).where(self.model.organizacion_id == organizacion_id)
        if only_active:
            stmt = stmt.where(self.model.is_active.is_(True))
        return stmt

    async def get(self, session: AsyncSession, organizacion_id: UUID, obj_id: UUID) -> Optional[T]:
        result = await session.execute(
            self._scoped(organizacion_id).where(self.model.id == obj_id)
        )
        return result.scalars().first()

    async def find_one(self, session: AsyncSession, organizacion_id: UUID, *criteria) -> Optional[T]:
        result = await session.execute(self._scoped(organizacion_id).where(*criteria))
        return result.scalars().first()

    async def list(
        self,
        session: AsyncSession,
        organizacion_id: UUID,
        *criteria,
        order_by: Iterable[Any] = (),
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Sequence[T]:
        stmt = self._scoped(organizacion_id).where(*criteria).order_by(*order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_with_total(
        self,
        session: AsyncSession,
        organizacion_id: UUID,
        *criteria,
        order_by: Iterable[Any] = (),
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Tuple[Sequence[T], int]:
        items = await self.list(
            session, organizacion_id, *criteria, order_by=order_by, limit=limit, offset=offset
        )
        total = await self.count(session, organizacion_id, *criteria)
        return items, total

    async def count(self, session: AsyncSession, organizacion_id: UUID, *criteria) -> int:
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(
                self.model.organizacion_id == organizacion_id,
                self.model.is_active.is_(True),
                *criteria,
            )
        )
        return int((await session.execute(stmt)).scalar_one())

    async def count_by(
        self,
        session: AsyncSession,
        organizacion_id: UUID,
        column,
        keys: Iterable[Enum],
    ) -> Dict[str, int]:
        """Conteo agrupado por una columna enum, con todas las claves en cero por defecto."""
        stmt = (
            select(column, func.count())
            .where(
                self.model.organizacion_id == organizacion_id,
                self.model.is_active.is_(True),
            )
            .group_by(column)
        )
        counts = {k.value: 0 for k in keys}
        for value, total in (await session.execute(stmt)).all():
            if value is None:
                continue
            key = value.value if isinstance(value, Enum) else str(value)
            counts[key] = int(total)
        return counts

    async def create(self, session: AsyncSession, **kwargs) -> T:
        obj = self.model(**kwargs)
        session.add(obj)
        await session.flush()
        return obj


__all__ = ["TenantRepository"]
# Fin del archivo sgc/shared/database/repository.py
