"""GetCategories Query."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from apps.volunteers.application.categories.exceptions import CategoryNotFoundError

if TYPE_CHECKING:
    from apps.volunteers.application.categories.ports import CategoriesGateway
    from apps.volunteers.domain.entities import Category


class GetCategoriesQuery:
    def __init__(self, gateway: "CategoriesGateway") -> None:
        self._gateway = gateway

    async def list_all(self) -> list["Category"]:
        return await self._gateway.list_all()

    async def by_id(self, category_id: UUID) -> "Category":
        category = await self._gateway.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category
