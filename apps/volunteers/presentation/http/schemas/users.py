"""Users HTTP Schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from apps.volunteers.domain.enums import AdminPermission, UserRole, UserStatus


class UserResponse(BaseModel):
    """사용자 응답 (login, password 제외)."""

    id: UUID
    fullname: str
    role: UserRole
    status: UserStatus
    is_blocked: bool
    vk_id: int | None = None
    vk: str | None = None
    phone: str | None = None
    address: str | None = None
    avatar: str | None = None
    coordinates: list[float] = Field(default_factory=list)
    permissions: list[AdminPermission] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class UserUpdateRequest(BaseModel):
    """프로필 수정 요청. 생략한 필드는 변경되지 않습니다."""

    fullname: str | None = Field(None, min_length=1, max_length=200)
    phone: str | None = Field(None, max_length=20)
    address: str | None = None
    avatar: str | None = None
    vk: str | None = None
    coordinates: list[float] | None = None


class ChangeStatusRequest(BaseModel):
    status: UserStatus


class CreateAdminRequest(BaseModel):
    """관리자 생성 요청."""

    login: str = Field(..., min_length=3, max_length=64)
    password: str = Field(..., min_length=6, max_length=128)
    fullname: str = Field(..., min_length=1, max_length=200)
    role: UserRole = UserRole.ADMIN
    phone: str | None = Field(None, max_length=20)
    permissions: list[AdminPermission] = Field(default_factory=list)


class ChangePermissionsRequest(BaseModel):
    permissions: list[AdminPermission]
