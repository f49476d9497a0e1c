"""Auth DTOs."""

from apps.volunteers.application.auth.dto.auth import (
    LoginUrlRequest,
    LoginUrlResponse,
    SessionTokenResponse,
    SignInRequest,
    VkCallbackRequest,
)

__all__ = [
    "LoginUrlRequest",
    "LoginUrlResponse",
    "SessionTokenResponse",
    "SignInRequest",
    "VkCallbackRequest",
]
