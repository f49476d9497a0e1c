"""HTTP Auth (bearer session token)."""

from apps.volunteers.presentation.http.auth.dependencies import (
    get_current_user,
    require_roles,
)

__all__ = ["get_current_user", "require_roles"]
