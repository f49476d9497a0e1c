"""Auth exceptions."""

from apps.volunteers.application.auth.exceptions.auth import (
    AccountCreationError,
    OAuthProviderError,
    UnauthorizedError,
)

__all__ = [
    "AccountCreationError",
    "OAuthProviderError",
    "UnauthorizedError",
]
