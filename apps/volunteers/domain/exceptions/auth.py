"""Session token exceptions."""

from apps.volunteers.domain.exceptions.base import DomainError


class InvalidTokenError(DomainError):
    """유효하지 않은 세션 토큰."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)


class TokenExpiredError(DomainError):
    """만료된 세션 토큰."""

    def __init__(self) -> None:
        super().__init__("Token has expired")
