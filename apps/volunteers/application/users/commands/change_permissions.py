"""ChangeAdminPermissions Command."""

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
    from apps.volunteers.domain.enums import AdminPermission

logger = logging.getLogger(__name__)


class ChangeAdminPermissionsInteractor:
    """관리자 권한 변경 유스케이스. admin 계정만 권한을 가집니다."""

    def __init__(
        self,
        query_gateway: "UsersQueryGateway",
        command_gateway: "UsersCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._query_gateway = query_gateway
        self._command_gateway = command_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: UUID, permissions: list["AdminPermission"]) -> UserView:
        user = await get_existing_user(self._query_gateway, user_id)
        UserPolicy.ensure_can_change_permissions(user)

        user.set_permissions(permissions)
        updated = await self._command_gateway.update(user)
        await self._tx.commit()

        logger.info(
            "Admin permissions changed",
            extra={
                "user_id": str(user_id),
                "permissions": [p.value for p in updated.permissions],
            },
        )
        return UserView.from_entity(updated)
