"""CategoriesGateway Port."""

from typing import Protocol
from uuid import UUID

from apps.volunteers.domain.entities import Category


class CategoriesGateway(Protocol):
    """카테고리 저장소.

    구현체:
        - SqlaCategoriesGateway (infrastructure/persistence_postgres/adapters/)
    """

    async def get_by_id(self, category_id: UUID) -> Category | None:
        ...

    async def list_all(self) -> list[Category]:
        ...

    async def add(self, category: Category) -> Category:
        ...

    async def update(self, category: Category) -> Category:
        ...

    async def delete(self, category_id: UUID) -> None:
        ...
