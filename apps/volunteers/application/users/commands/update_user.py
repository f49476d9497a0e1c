"""UpdateUser Command - 프로필 수정."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.volunteers.application.users.dto import UserView
from apps.volunteers.application.users.exceptions import NoChangesProvidedError
from apps.volunteers.application.users.services import get_existing_user

if TYPE_CHECKING:
    from apps.volunteers.application.common.ports import TransactionManager
    from apps.volunteers.application.users.dto import UpdateUserRequest
    from apps.volunteers.application.users.ports import (
        UsersCommandGateway,
        UsersQueryGateway,
    )

logger = logging.getLogger(__name__)


class UpdateUserInteractor:
    """사용자 프로필 업데이트 유스케이스.

    역할, 상태, 권한은 이 경로로 변경할 수 없습니다.
    """

    def __init__(
        self,
        query_gateway: "UsersQueryGateway",
        command_gateway: "UsersCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._query_gateway = query_gateway
        self._command_gateway = command_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: UUID, update: "UpdateUserRequest") -> UserView:
        """
        Raises:
            NoChangesProvidedError: 변경사항 없음
            UserNotFoundError: 사용자를 찾을 수 없음
        """
        if not update.has_changes():
            raise NoChangesProvidedError()

        user = await get_existing_user(self._query_gateway, user_id)
        user.update_profile(
            fullname=update.fullname,
            phone=update.phone,
            address=update.address,
            avatar=update.avatar,
            vk=update.vk,
            coordinates=update.coordinates,
        )
        updated = await self._command_gateway.update(user)
        await self._tx.commit()

        logger.info("User profile updated", extra={"user_id": str(user_id)})
        return UserView.from_entity(updated)
