"""User lookup helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from apps.volunteers.domain.exceptions.user import UserNotFoundError

if TYPE_CHECKING:
    from apps.volunteers.application.users.ports import UsersQueryGateway
    from apps.volunteers.domain.entities import User


async def get_existing_user(query_gateway: "UsersQueryGateway", user_id: UUID) -> "User":
    """ID로 사용자를 조회하고, 없으면 UserNotFoundError를 발생시킵니다."""
    user = await query_gateway.get_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user
