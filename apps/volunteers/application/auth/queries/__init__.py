"""Auth Queries."""

from apps.volunteers.application.auth.queries.current_user import GetCurrentUserQuery
from apps.volunteers.application.auth.queries.validate_password import ValidatePasswordQuery

__all__ = ["GetCurrentUserQuery", "ValidatePasswordQuery"]
