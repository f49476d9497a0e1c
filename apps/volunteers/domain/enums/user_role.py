"""User Role Enum."""

from enum import Enum


class UserRole(str, Enum):
    """사용자 역할."""

    RECIPIENT = "recipient"
    VOLUNTEER = "volunteer"
    ADMIN = "admin"
    MASTER = "master"

    @property
    def is_staff(self) -> bool:
        """관리 권한을 가진 역할 여부 (admin, master)."""
        return self in (UserRole.ADMIN, UserRole.MASTER)
