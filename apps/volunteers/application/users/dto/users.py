"""Users DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from apps.volunteers.domain.enums import AdminPermission, UserRole, UserStatus

if TYPE_CHECKING:
    from apps.volunteers.domain.entities import User


@dataclass(frozen=True, slots=True)
class CreateUserRequest:
    """사용자 등록 요청."""

    login: str | None
    password: str | None
    fullname: str
    role: UserRole
    phone: str | None = None
    address: str | None = None
    avatar: str | None = None
    vk: str | None = None
    vk_id: int | None = None
    coordinates: list[float] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CreateAdminRequest:
    """관리자 생성 요청."""

    login: str
    password: str
    fullname: str
    role: UserRole = UserRole.ADMIN
    phone: str | None = None
    permissions: list[AdminPermission] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class UpdateUserRequest:
    """프로필 수정 요청. None 필드는 변경하지 않습니다."""

    fullname: str | None = None
    phone: str | None = None
    address: str | None = None
    avatar: str | None = None
    vk: str | None = None
    coordinates: list[float] | None = None

    def has_changes(self) -> bool:
        return any(
            value is not None
            for value in (
                self.fullname,
                self.phone,
                self.address,
                self.avatar,
                self.vk,
                self.coordinates,
            )
        )


@dataclass(frozen=True, slots=True)
class UserView:
    """외부 노출용 사용자 뷰 (login, password 제외)."""

    id: UUID
    fullname: str
    role: UserRole
    status: UserStatus
    is_blocked: bool
    vk_id: int | None
    vk: str | None
    phone: str | None
    address: str | None
    avatar: str | None
    coordinates: list[float]
    permissions: list[AdminPermission]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: "User") -> "UserView":
        return cls(
            id=user.id,
            fullname=user.fullname,
            role=user.role,
            status=user.status,
            is_blocked=user.is_blocked,
            vk_id=user.vk_id,
            vk=user.vk,
            phone=user.phone,
            address=user.address,
            avatar=user.avatar,
            coordinates=list(user.coordinates or []),
            permissions=list(user.permissions or []),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
