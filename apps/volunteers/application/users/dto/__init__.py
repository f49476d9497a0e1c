"""Users DTOs."""

from apps.volunteers.application.users.dto.users import (
    CreateAdminRequest,
    CreateUserRequest,
    UpdateUserRequest,
    UserView,
)

__all__ = [
    "CreateAdminRequest",
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserView",
]
