"""Domain Exceptions."""

from apps.volunteers.domain.exceptions.auth import (
    InvalidTokenError,
    TokenExpiredError,
)
from apps.volunteers.domain.exceptions.base import DomainError
from apps.volunteers.domain.exceptions.user import (
    ForbiddenError,
    LoginAlreadyExistsError,
    UserNotFoundError,
)
from apps.volunteers.domain.exceptions.validation import InvalidEmailError, ValidationError

__all__ = [
    "DomainError",
    "ForbiddenError",
    "InvalidEmailError",
    "InvalidTokenError",
    "LoginAlreadyExistsError",
    "TokenExpiredError",
    "UserNotFoundError",
    "ValidationError",
]
