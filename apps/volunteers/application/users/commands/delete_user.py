"""DeleteUser Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.volunteers.application.users.services import get_existing_user

if TYPE_CHECKING:
    from apps.volunteers.application.common.ports import TransactionManager
    from apps.volunteers.application.users.ports import (
        UsersCommandGateway,
        UsersQueryGateway,
    )

logger = logging.getLogger(__name__)


class DeleteUserInteractor:
    """사용자 삭제 유스케이스 (관리자 명시적 삭제).

    Note:
        CASCADE 삭제로 tokens도 함께 삭제됩니다.
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

    async def execute(self, user_id: UUID) -> None:
        await get_existing_user(self._query_gateway, user_id)

        await self._command_gateway.delete(user_id)
        await self._tx.commit()

        logger.info("User deleted", extra={"user_id": str(user_id)})
