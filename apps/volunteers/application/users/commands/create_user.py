"""CreateUser / CreateAdmin Commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.volunteers.application.users.dto import UserView

if TYPE_CHECKING:
    from apps.volunteers.application.common.ports import TransactionManager
    from apps.volunteers.application.users.dto import CreateAdminRequest, CreateUserRequest
    from apps.volunteers.application.users.services import UserRegistrar


class CreateUserInteractor:
    """사용자 등록 유스케이스 (recipient, volunteer)."""

    def __init__(
        self,
        registrar: "UserRegistrar",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._registrar = registrar
        self._tx = transaction_manager

    async def execute(self, request: "CreateUserRequest") -> UserView:
        """사용자를 등록합니다.

        Raises:
            ForbiddenError: admin/master 자가 등록 시도
            LoginAlreadyExistsError: login 중복
        """
        user = await self._registrar.register(request)
        await self._tx.commit()
        return UserView.from_entity(user)


class CreateAdminInteractor:
    """관리자 생성 유스케이스 (master 전용 경로)."""

    def __init__(
        self,
        registrar: "UserRegistrar",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._registrar = registrar
        self._tx = transaction_manager

    async def execute(self, request: "CreateAdminRequest") -> UserView:
        """
        Raises:
            ForbiddenError: recipient/volunteer 생성 시도
            LoginAlreadyExistsError: login 중복
        """
        user = await self._registrar.register_admin(request)
        await self._tx.commit()
        return UserView.from_entity(user)
