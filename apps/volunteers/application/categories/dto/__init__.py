"""Categories DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CreateCategoryRequest:
    title: str
    points: int


@dataclass(frozen=True, slots=True)
class UpdateCategoryRequest:
    """None 필드는 변경하지 않습니다."""

    title: str | None = None
    points: int | None = None


__all__ = ["CreateCategoryRequest", "UpdateCategoryRequest"]
