"""GetCurrentUser Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.volunteers.application.auth.exceptions import UnauthorizedError
from apps.volunteers.domain.services import UserPolicy

if TYPE_CHECKING:
    from apps.volunteers.application.auth.ports import SessionTokenIssuer
    from apps.volunteers.application.users.ports import UsersQueryGateway
    from apps.volunteers.domain.entities import User

logger = logging.getLogger(__name__)


class GetCurrentUserQuery:
    """세션 토큰으로 현재 사용자를 조회합니다."""

    def __init__(
        self,
        token_issuer: "SessionTokenIssuer",
        users_query_gateway: "UsersQueryGateway",
    ) -> None:
        self._token_issuer = token_issuer
        self._users_query_gateway = users_query_gateway

    async def execute(self, token: str) -> "User":
        """
        Raises:
            InvalidTokenError: 서명/형식 오류
            TokenExpiredError: 만료된 토큰
            UnauthorizedError: 토큰의 사용자가 존재하지 않음
            ForbiddenError: 차단된 사용자
        """
        payload = self._token_issuer.decode(token)

        user = await self._users_query_gateway.get_by_id(payload.user_id)
        if user is None:
            logger.warning("User not found for token", extra={"user_id": str(payload.user_id)})
            raise UnauthorizedError("User not found")

        UserPolicy.ensure_not_blocked(user)
        return user
