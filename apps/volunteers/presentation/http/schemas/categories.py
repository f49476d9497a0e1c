"""Categories HTTP Schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class CategoryCreateRequest(BaseModel):
    title: str = Field(..., description="카테고리 이름")
    points: int = Field(..., description="포인트 (양수)")


class CategoryUpdateRequest(BaseModel):
    title: str | None = None
    points: int | None = None


class CategoryResponse(BaseModel):
    id: UUID
    title: str
    points: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
