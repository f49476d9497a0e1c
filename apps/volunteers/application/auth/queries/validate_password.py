"""ValidatePassword Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.volunteers.application.auth.exceptions import UnauthorizedError

if TYPE_CHECKING:
    from apps.volunteers.application.common.ports import PasswordHasher
    from apps.volunteers.application.users.ports import UsersQueryGateway
    from apps.volunteers.domain.entities import User

logger = logging.getLogger(__name__)


class ValidatePasswordQuery:
    """login/password 검증.

    사용자 없음, 비밀번호 미설정(VK 전용 계정), 해시 불일치 모두
    동일한 UnauthorizedError로 응답합니다.
    """

    def __init__(
        self,
        users_query_gateway: "UsersQueryGateway",
        password_hasher: "PasswordHasher",
    ) -> None:
        self._users_query_gateway = users_query_gateway
        self._password_hasher = password_hasher

    async def execute(self, login: str, password: str) -> "User":
        user = await self._users_query_gateway.get_by_login(login)
        if user is None or not user.password:
            # login 존재 여부와 무관하게 동일한 해시 비용
            await self._password_hasher.verify(password, None)
            raise UnauthorizedError()

        if not await self._password_hasher.verify(password, user.password):
            logger.info("Password mismatch", extra={"user_id": str(user.id)})
            raise UnauthorizedError()

        return user
