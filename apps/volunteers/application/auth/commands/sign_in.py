"""SignIn Command - login/password 로그인."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.volunteers.application.auth.dto import SessionTokenResponse, SignInRequest
from apps.volunteers.domain.services import UserPolicy

if TYPE_CHECKING:
    from apps.volunteers.application.auth.ports import SessionTokenIssuer
    from apps.volunteers.application.auth.queries import ValidatePasswordQuery

logger = logging.getLogger(__name__)


class SignInInteractor:
    """비밀번호 검증 후 세션 토큰을 발급합니다."""

    def __init__(
        self,
        validate_password: "ValidatePasswordQuery",
        token_issuer: "SessionTokenIssuer",
    ) -> None:
        self._validate_password = validate_password
        self._token_issuer = token_issuer

    async def execute(self, request: SignInRequest) -> SessionTokenResponse:
        """
        Raises:
            UnauthorizedError: 잘못된 login/password
            ForbiddenError: 차단된 사용자
        """
        user = await self._validate_password.execute(request.login, request.password)
        UserPolicy.ensure_not_blocked(user)

        issued = self._token_issuer.issue(user_id=user.id)
        logger.info("Password sign-in successful", extra={"user_id": str(user.id)})

        return SessionTokenResponse(
            user_id=user.id,
            access_token=issued.token,
            expires_at=issued.expires_at,
        )
