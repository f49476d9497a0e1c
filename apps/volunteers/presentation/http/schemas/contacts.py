"""Contacts HTTP Schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class ContactCreateRequest(BaseModel):
    email: str = Field(..., description="이메일 (도메인 계층에서 형식 검증)")
    social_network: str = Field(..., description="소셜 네트워크 링크")
    expiration_date: datetime | None = None


class ContactResponse(BaseModel):
    id: UUID
    email: str
    social_network: str
    expiration_date: datetime | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
