"""ChangeStatus / GiveKey Commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.volunteers.application.users.dto import UserView
from apps.volunteers.application.users.services import get_existing_user
from apps.volunteers.domain.services import UserPolicy

if TYPE_CHECKING:
    from apps.volunteers.application.common.ports import TransactionManager
    from apps.volunteers.application.users.ports import (
        UsersCommandGateway,
        UsersQueryGateway,
    )
    from apps.volunteers.domain.enums import UserStatus

logger = logging.getLogger(__name__)


class ChangeStatusInteractor:
    """volunteer 상태 변경 유스케이스 (confirmed/unconfirmed)."""

    def __init__(
        self,
        query_gateway: "UsersQueryGateway",
        command_gateway: "UsersCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._query_gateway = query_gateway
        self._command_gateway = command_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: UUID, status: "UserStatus") -> UserView:
        """
        Raises:
            UserNotFoundError: 사용자를 찾을 수 없음
            ForbiddenError: volunteer가 아니거나 허용되지 않은 상태
        """
        user = await get_existing_user(self._query_gateway, user_id)
        UserPolicy.ensure_can_change_status(user, status)

        user.set_status(status)
        updated = await self._command_gateway.update(user)
        await self._tx.commit()

        logger.info(
            "User status changed",
            extra={"user_id": str(user_id), "status": status.value},
        )
        return UserView.from_entity(updated)


class GiveKeyInteractor:
    """volunteer 활성화 유스케이스 ("키 발급")."""

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
        UserPolicy.ensure_can_give_key(user)

        user.activate()
        updated = await self._command_gateway.update(user)
        await self._tx.commit()

        logger.info("Volunteer activated", extra={"user_id": str(user_id)})
        return UserView.from_entity(updated)
