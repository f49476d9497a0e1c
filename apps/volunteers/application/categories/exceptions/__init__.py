"""Categories exceptions."""

from uuid import UUID

from apps.volunteers.application.common.exceptions.base import ApplicationError


class CategoryNotFoundError(ApplicationError):
    """카테고리를 찾을 수 없음."""

    def __init__(self, category_id: UUID) -> None:
        self.category_id = category_id
        super().__init__(f"Category not found: {category_id}")


__all__ = ["CategoryNotFoundError"]
