"""Auth DTOs."""

from dataclasses import dataclass
from uuid import UUID

from apps.volunteers.domain.enums import UserRole


@dataclass(frozen=True, slots=True)
class LoginUrlRequest:
    """VK 로그인 URL 요청."""

    role: UserRole
    display: str = "page"
    scope: str = "offline"
    response_type: str = "code"


@dataclass(frozen=True, slots=True)
class LoginUrlResponse:
    """VK 로그인 URL 응답."""

    authorization_url: str


@dataclass(frozen=True, slots=True)
class VkCallbackRequest:
    """VK 콜백 요청 (인증 코드 + 요청 역할)."""

    code: str
    role: UserRole


@dataclass(frozen=True, slots=True)
class SignInRequest:
    """login/password 로그인 요청."""

    login: str
    password: str


@dataclass(frozen=True, slots=True)
class SessionTokenResponse:
    """세션 토큰 발급 결과."""

    user_id: UUID
    access_token: str
    expires_at: int
    is_new_user: bool = False
