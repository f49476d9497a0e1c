"""OAuthProviderGateway Port.

OAuth 프로바이더(VK)와의 통신을 담당하는 Gateway 인터페이스입니다.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class OAuthTokens:
    """인증 코드 교환 결과.

    VK 응답 예시:
        {"access_token": "vk1.a.XXXX", "expires_in": 86389, "user_id": 817575562}
    """

    access_token: str
    user_id: int
    expires_in: int


@dataclass
class OAuthProfile:
    """OAuth 프로필 데이터."""

    provider_user_id: int
    first_name: str = ""
    last_name: str = ""
    domain: str | None = None
    photo_max: str | None = None
    home_town: str | None = None
    country: str | None = None
    bdate: str | None = None
    sex: int | None = None

    @property
    def fullname(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @property
    def address(self) -> str | None:
        return ", ".join(part for part in (self.country, self.home_town) if part) or None


class OAuthProviderGateway(Protocol):
    """OAuth 프로바이더 Gateway 인터페이스.

    구현체:
        - VkOAuthProvider (infrastructure/oauth/)
    """

    def build_authorization_url(
        self,
        *,
        redirect_uri: str,
        display: str,
        scope: str,
        response_type: str,
    ) -> str:
        """인증 URL 생성 (부수효과 없음)."""
        ...

    async def exchange_code(self, *, code: str, redirect_uri: str) -> OAuthTokens:
        """인증 코드로 access token 교환.

        Raises:
            OAuthProviderError: 프로바이더 오류
        """
        ...

    async def fetch_profile(
        self,
        *,
        access_token: str,
        provider_user_id: int,
    ) -> OAuthProfile | None:
        """사용자 프로필 조회. 프로필이 비어 있으면 None.

        Raises:
            OAuthProviderError: 프로바이더 오류
        """
        ...
