"""GetUser Query."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from apps.volunteers.application.users.dto import UserView
from apps.volunteers.application.users.services import get_existing_user
from apps.volunteers.domain.exceptions.user import UserNotFoundError

if TYPE_CHECKING:
    from apps.volunteers.application.users.ports import UsersQueryGateway


class GetUserQuery:
    """단일 사용자 조회. 반환값에는 login/password가 포함되지 않습니다."""

    def __init__(self, query_gateway: "UsersQueryGateway") -> None:
        self._query_gateway = query_gateway

    async def by_id(self, user_id: UUID) -> UserView:
        """
        Raises:
            UserNotFoundError: 사용자를 찾을 수 없음
        """
        user = await get_existing_user(self._query_gateway, user_id)
        return UserView.from_entity(user)

    async def by_fullname(self, fullname: str) -> UserView:
        user = await self._query_gateway.get_by_fullname(fullname)
        if user is None:
            raise UserNotFoundError(fullname)
        return UserView.from_entity(user)
