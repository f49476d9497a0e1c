"""SessionTokenIssuer Port."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True)
class IssuedSessionToken:
    """발급된 세션 토큰."""

    token: str
    expires_at: int


@dataclass(frozen=True)
class SessionPayload:
    """디코딩된 세션 토큰 페이로드."""

    user_id: UUID
    exp: int
    access_token: str | None = None


class SessionTokenIssuer(Protocol):
    """세션 토큰 서명/검증 포트.

    구현체:
        - JwtTokenService (infrastructure/security/)
    """

    def issue(
        self,
        *,
        user_id: UUID,
        access_token: str | None = None,
        expires_in_seconds: int | None = None,
    ) -> IssuedSessionToken:
        """세션 토큰 발급. expires_in_seconds가 없으면 기본 만료 시간 사용."""
        ...

    def decode(self, token: str) -> SessionPayload:
        """세션 토큰 디코딩.

        Raises:
            InvalidTokenError: 서명/형식 오류
            TokenExpiredError: 만료된 토큰
        """
        ...
