"""SQLAlchemy implementation of category gateway."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.volunteers.domain.entities.category import Category
from apps.volunteers.infrastructure.persistence_postgres.mappings.categories import (
    categories_table,
)


class SqlaCategoriesGateway:
    """카테고리 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, category_id: UUID) -> Category | None:
        result = await self._session.execute(
            select(Category).where(categories_table.c.id == category_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Category]:
        result = await self._session.execute(
            select(Category).order_by(categories_table.c.title)
        )
        return list(result.scalars().all())

    async def add(self, category: Category) -> Category:
        self._session.add(category)
        await self._session.flush()
        return category

    async def update(self, category: Category) -> Category:
        merged = await self._session.merge(category)
        await self._session.flush()
        return merged

    async def delete(self, category_id: UUID) -> None:
        await self._session.execute(
            delete(categories_table).where(categories_table.c.id == category_id)
        )
        await self._session.flush()
