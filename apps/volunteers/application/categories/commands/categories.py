"""Category commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.volunteers.application.categories.exceptions import CategoryNotFoundError
from apps.volunteers.domain.entities import Category

if TYPE_CHECKING:
    from apps.volunteers.application.categories.dto import (
        CreateCategoryRequest,
        UpdateCategoryRequest,
    )
    from apps.volunteers.application.categories.ports import CategoriesGateway
    from apps.volunteers.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class CreateCategoryInteractor:
    def __init__(
        self,
        gateway: "CategoriesGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._gateway = gateway
        self._tx = transaction_manager

    async def execute(self, request: "CreateCategoryRequest") -> Category:
        """
        Raises:
            ValidationError: 제목 길이 또는 포인트 값 오류
        """
        category = await self._gateway.add(Category(title=request.title, points=request.points))
        await self._tx.commit()
        logger.info("Category created", extra={"category_id": str(category.id)})
        return category


class UpdateCategoryInteractor:
    def __init__(
        self,
        gateway: "CategoriesGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._gateway = gateway
        self._tx = transaction_manager

    async def execute(self, category_id: UUID, request: "UpdateCategoryRequest") -> Category:
        category = await self._gateway.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        category.update(title=request.title, points=request.points)
        updated = await self._gateway.update(category)
        await self._tx.commit()
        return updated


class DeleteCategoryInteractor:
    def __init__(
        self,
        gateway: "CategoriesGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._gateway = gateway
        self._tx = transaction_manager

    async def execute(self, category_id: UUID) -> None:
        if await self._gateway.get_by_id(category_id) is None:
            raise CategoryNotFoundError(category_id)

        await self._gateway.delete(category_id)
        await self._tx.commit()
        logger.info("Category deleted", extra={"category_id": str(category_id)})
