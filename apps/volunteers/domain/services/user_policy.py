"""User Policy Domain Service.

역할 기반 사용자 상태 전이 규칙을 담당합니다.
순수 도메인 로직만 포함하며 DB 접근은 Application Layer에서 처리합니다.
"""

from __future__ import annotations

from apps.volunteers.domain.entities.user import User
from apps.volunteers.domain.enums import UserRole, UserStatus
from apps.volunteers.domain.exceptions.user import (
    ADMIN_CREATING_FORBIDDEN,
    ONLY_FOR_ADMINS,
    ONLY_FOR_VOLUNTEERS,
    STATUS_NOT_ALLOWED,
    USER_BLOCKED,
    USER_CREATING_FORBIDDEN,
    ForbiddenError,
)

SELF_ASSIGNABLE_STATUSES = frozenset({UserStatus.CONFIRMED, UserStatus.UNCONFIRMED})


class UserPolicy:
    """사용자 역할/상태 규칙."""

    @staticmethod
    def ensure_can_register(role: UserRole) -> None:
        """일반 가입 경로에서 admin/master 생성을 막습니다."""
        if role in (UserRole.ADMIN, UserRole.MASTER):
            raise ForbiddenError(USER_CREATING_FORBIDDEN)

    @staticmethod
    def ensure_can_create_admin(role: UserRole) -> None:
        """관리자 생성 경로에서 recipient/volunteer 생성을 막습니다."""
        if role in (UserRole.RECIPIENT, UserRole.VOLUNTEER):
            raise ForbiddenError(ADMIN_CREATING_FORBIDDEN)

    @staticmethod
    def ensure_can_change_status(user: User, status: UserStatus) -> None:
        """volunteer만 confirmed/unconfirmed로 변경할 수 있습니다."""
        if user.role != UserRole.VOLUNTEER:
            raise ForbiddenError(ONLY_FOR_VOLUNTEERS)
        if status not in SELF_ASSIGNABLE_STATUSES:
            raise ForbiddenError(STATUS_NOT_ALLOWED)

    @staticmethod
    def ensure_can_give_key(user: User) -> None:
        if user.role != UserRole.VOLUNTEER:
            raise ForbiddenError(ONLY_FOR_VOLUNTEERS)

    @staticmethod
    def ensure_can_change_permissions(user: User) -> None:
        if user.role != UserRole.ADMIN:
            raise ForbiddenError(ONLY_FOR_ADMINS)

    @staticmethod
    def ensure_not_blocked(user: User) -> None:
        if user.is_blocked:
            raise ForbiddenError(USER_BLOCKED)
