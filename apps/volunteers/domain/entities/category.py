"""Category Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from apps.volunteers.domain.exceptions.validation import ValidationError

CATEGORY_TITLE_MIN_LENGTH = 2
CATEGORY_TITLE_MAX_LENGTH = 100


def validate_category_title(title: str) -> str:
    value = (title or "").strip()
    if not CATEGORY_TITLE_MIN_LENGTH <= len(value) <= CATEGORY_TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Category title must be {CATEGORY_TITLE_MIN_LENGTH}-"
            f"{CATEGORY_TITLE_MAX_LENGTH} characters long"
        )
    return value


def validate_category_points(points: int) -> int:
    if isinstance(points, bool) or not isinstance(points, int) or points <= 0:
        raise ValidationError("Category points must be a positive integer")
    return points


@dataclass
class Category:
    """카테고리 엔티티 (제목 + 포인트)."""

    title: str
    points: int
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        self.title = validate_category_title(self.title)
        self.points = validate_category_points(self.points)

    def update(self, *, title: str | None = None, points: int | None = None) -> None:
        if title is not None:
            self.title = validate_category_title(title)
        if points is not None:
            self.points = validate_category_points(points)
        self.updated_at = datetime.now(timezone.utc)
