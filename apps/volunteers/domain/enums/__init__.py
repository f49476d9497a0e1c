"""Domain Enums."""

from apps.volunteers.domain.enums.admin_permission import AdminPermission
from apps.volunteers.domain.enums.user_role import UserRole
from apps.volunteers.domain.enums.user_status import UserStatus

__all__ = ["AdminPermission", "UserRole", "UserStatus"]
