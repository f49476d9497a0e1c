"""User domain exceptions."""

from __future__ import annotations

from uuid import UUID

from apps.volunteers.domain.exceptions.base import DomainError

USER_CREATING_FORBIDDEN = "Admin and master accounts cannot be self-registered"
ADMIN_CREATING_FORBIDDEN = "Only admin accounts can be created through this path"
ONLY_FOR_VOLUNTEERS = "Operation is available for volunteers only"
ONLY_FOR_ADMINS = "Operation is available for admins only"
STATUS_NOT_ALLOWED = "Status can only be set to confirmed or unconfirmed"
USER_BLOCKED = "User is blocked"
ACCESS_DENIED = "Access denied"


class UserNotFoundError(DomainError):
    """사용자를 찾을 수 없음."""

    def __init__(self, user_id: UUID | str | None = None) -> None:
        self.user_id = user_id
        message = f"User not found: {user_id}" if user_id is not None else "User not found"
        super().__init__(message)


class LoginAlreadyExistsError(DomainError):
    """login 또는 vk_id 중복."""

    def __init__(self, message: str = "User with this login already exists") -> None:
        super().__init__(message)


class ForbiddenError(DomainError):
    """역할/권한 규칙 위반."""

    def __init__(self, message: str = ACCESS_DENIED) -> None:
        super().__init__(message)
