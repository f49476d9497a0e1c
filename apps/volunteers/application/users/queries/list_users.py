"""ListUsers Query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.volunteers.application.users.dto import UserView

if TYPE_CHECKING:
    from apps.volunteers.application.users.ports import UsersQueryGateway


class ListUsersQuery:
    """전체 사용자 목록 조회."""

    def __init__(self, query_gateway: "UsersQueryGateway") -> None:
        self._query_gateway = query_gateway

    async def execute(self) -> list[UserView]:
        users = await self._query_gateway.list_all()
        return [UserView.from_entity(user) for user in users]
