"""BlockUser Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.volunteers.application.users.dto import UserView
from apps.volunteers.application.users.services import get_existing_user

if TYPE_CHECKING:
    from apps.volunteers.application.common.ports import TransactionManager
    from apps.volunteers.application.users.ports import (
        UsersCommandGateway,
        UsersQueryGateway,
    )

logger = logging.getLogger(__name__)


class BlockUserInteractor:
    """사용자 차단 토글 유스케이스. 두 번 호출하면 원래 상태로 돌아갑니다."""

    def __init__(
        self,
        query_gateway: "UsersQueryGateway",
        command_gateway: "UsersCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._query_gateway = query_gateway
        self._command_gateway = command_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: UUID) -> UserView:
        user = await get_existing_user(self._query_gateway, user_id)

        user.toggle_blocked()
        updated = await self._command_gateway.update(user)
        await self._tx.commit()

        logger.info(
            "User block toggled",
            extra={"user_id": str(user_id), "is_blocked": updated.is_blocked},
        )
        return UserView.from_entity(updated)
