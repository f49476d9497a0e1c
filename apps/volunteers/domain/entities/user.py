"""User Entity.

ORM과 분리된 순수 도메인 엔티티입니다.
SQLAlchemy 매핑은 infrastructure/persistence_postgres/mappings/users.py에서 정의합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from apps.volunteers.domain.enums import AdminPermission, UserRole, UserStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """사용자 엔티티.

    Attributes:
        id: 사용자 고유 식별자
        login: 로그인 (고유, VK 전용 계정은 VK domain 사용)
        password: bcrypt 해시 (VK 전용 계정은 None)
        fullname: 이름
        role: 역할 (recipient, volunteer, admin, master)
        status: 상태 (unconfirmed, confirmed, activated)
        is_blocked: 차단 여부
        vk_id: VK 사용자 ID (고유, 선택)
        permissions: 관리자 권한 목록 (admin 전용)
    """

    fullname: str
    role: UserRole
    id: UUID = field(default_factory=uuid4)
    login: str | None = None
    password: str | None = None
    status: UserStatus = UserStatus.UNCONFIRMED
    is_blocked: bool = False
    vk_id: int | None = None
    vk: str | None = None
    phone: str | None = None
    address: str | None = None
    avatar: str | None = None
    coordinates: list[float] = field(default_factory=list)
    permissions: list[AdminPermission] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def set_status(self, status: UserStatus) -> None:
        self.status = status
        self.touch()

    def activate(self) -> None:
        self.set_status(UserStatus.ACTIVATED)

    def set_permissions(self, permissions: list[AdminPermission]) -> None:
        # 중복 제거, 순서 유지
        self.permissions = list(dict.fromkeys(permissions))
        self.touch()

    def toggle_blocked(self) -> None:
        self.is_blocked = not self.is_blocked
        self.touch()

    def update_profile(
        self,
        *,
        fullname: str | None = None,
        phone: str | None = None,
        address: str | None = None,
        avatar: str | None = None,
        vk: str | None = None,
        coordinates: list[float] | None = None,
    ) -> None:
        """프로필 정보를 업데이트합니다. None 값은 무시됩니다."""
        if fullname is not None:
            self.fullname = fullname
        if phone is not None:
            self.phone = phone
        if address is not None:
            self.address = address
        if avatar is not None:
            self.avatar = avatar
        if vk is not None:
            self.vk = vk
        if coordinates is not None:
            self.coordinates = list(coordinates)
        self.touch()

    def touch(self) -> None:
        self.updated_at = _utcnow()

    def __repr__(self) -> str:
        return f"User(id={self.id}, role={self.role.value}, status={self.status.value})"
