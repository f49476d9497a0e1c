"""BuildLoginUrl Command.

VK 로그인 페이지 URL 생성 Use Case입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.volunteers.application.auth.dto import LoginUrlRequest, LoginUrlResponse
from apps.volunteers.application.auth.services import build_callback_uri

if TYPE_CHECKING:
    from apps.volunteers.application.auth.ports import OAuthProviderGateway


class BuildLoginUrlInteractor:
    """VK 인증 URL 생성 Interactor.

    요청 역할은 콜백 URL의 role 쿼리 파라미터로 전달되어
    콜백 단계에서 신규 사용자 생성 시 사용됩니다.
    """

    def __init__(self, oauth_provider: "OAuthProviderGateway", redirect_uri: str) -> None:
        self._oauth_provider = oauth_provider
        self._redirect_uri = redirect_uri

    def execute(self, request: LoginUrlRequest) -> LoginUrlResponse:
        authorization_url = self._oauth_provider.build_authorization_url(
            redirect_uri=build_callback_uri(self._redirect_uri, request.role),
            display=request.display,
            scope=request.scope,
            response_type=request.response_type,
        )
        return LoginUrlResponse(authorization_url=authorization_url)
