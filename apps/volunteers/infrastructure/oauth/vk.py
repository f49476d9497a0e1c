"""VK OAuth Provider.

OAuthProviderGateway 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from apps.volunteers.application.auth.exceptions import OAuthProviderError
from apps.volunteers.application.auth.ports import OAuthProfile, OAuthTokens

logger = logging.getLogger(__name__)

VK_OAUTH_HOST = "https://oauth.vk.com"
VK_AUTH_URL = f"{VK_OAUTH_HOST}/authorize"
VK_TOKEN_URL = f"{VK_OAUTH_HOST}/access_token"
VK_USERS_GET_URL = "https://api.vk.com/method/users.get"

VK_PROFILE_FIELDS = (
    "bdate",
    "has_photo",
    "photo_max",
    "has_mobile",
    "home_town",
    "sex",
    "domain",
    "country",
)


class VkOAuthProvider:
    """VK OAuth 프로바이더.

    HTTP 클라이언트는 호출마다 생성합니다 (타임아웃은 설정에서 주입).
    """

    name = "vk"

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        api_version: str = "5.131",
        timeout_seconds: float = 5.0,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.api_version = api_version
        self._timeout = timeout_seconds

    def build_authorization_url(
        self,
        *,
        redirect_uri: str,
        display: str,
        scope: str,
        response_type: str,
    ) -> str:
        params = {
            "client_id": self.client_id,
            "redirect_uri": redirect_uri,
            "display": display,
            "scope": scope,
            "response_type": response_type,
        }
        return f"{VK_AUTH_URL}?{urlencode(params)}"

    async def exchange_code(self, *, code: str, redirect_uri: str) -> OAuthTokens:
        params = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": redirect_uri,
            "code": code,
        }
        payload = await self._get_json(VK_TOKEN_URL, params)

        if "error" in payload:
            reason = payload.get("error_description") or payload["error"]
            raise OAuthProviderError(self.name, str(reason))

        try:
            return OAuthTokens(
                access_token=payload["access_token"],
                user_id=int(payload["user_id"]),
                expires_in=int(payload.get("expires_in") or 0),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise OAuthProviderError(self.name, "Malformed token response") from e

    async def fetch_profile(
        self,
        *,
        access_token: str,
        provider_user_id: int,
    ) -> OAuthProfile | None:
        params = {
            "user_ids": str(provider_user_id),
            "fields": ",".join(VK_PROFILE_FIELDS),
            "access_token": access_token,
            "v": self.api_version,
        }
        payload = await self._get_json(VK_USERS_GET_URL, params)

        if "error" in payload:
            error = payload["error"]
            reason = error.get("error_msg") if isinstance(error, dict) else error
            raise OAuthProviderError(self.name, str(reason))

        users = payload.get("response") or []
        if not users:
            return None

        return self._to_profile(users[0])

    async def _get_json(self, url: str, params: dict[str, str]) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params)
                # VK는 토큰 오류를 4xx + JSON body로 반환
                if response.status_code >= 500:
                    response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"VK API error: {e.response.status_code}")
            raise OAuthProviderError(self.name, f"API error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning(f"VK request failed: {e}")
            raise OAuthProviderError(self.name, str(e)) from e
        except ValueError as e:
            raise OAuthProviderError(self.name, "Invalid JSON response") from e

    def _to_profile(self, raw: dict[str, Any]) -> OAuthProfile:
        country = raw.get("country")
        return OAuthProfile(
            provider_user_id=int(raw["id"]),
            first_name=raw.get("first_name") or "",
            last_name=raw.get("last_name") or "",
            domain=raw.get("domain"),
            photo_max=raw.get("photo_max"),
            home_town=raw.get("home_town") or None,
            country=country.get("title") if isinstance(country, dict) else None,
            bdate=raw.get("bdate"),
            sex=raw.get("sex"),
        )
