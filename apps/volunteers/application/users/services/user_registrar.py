"""UserRegistrar - 사용자 생성 서비스.

"연주자" 역할: 일반 가입, 관리자 생성, VK 최초 로그인이 공유하는
생성 절차(역할 검사, 비밀번호 해시, 중복 검사, 저장)를 담당합니다.
커밋은 호출하는 UseCase(지휘자)가 결정합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.volunteers.domain.entities import User
from apps.volunteers.domain.enums import UserStatus
from apps.volunteers.domain.exceptions.user import LoginAlreadyExistsError
from apps.volunteers.domain.services import UserPolicy

if TYPE_CHECKING:
    from apps.volunteers.application.common.ports import PasswordHasher
    from apps.volunteers.application.users.dto import CreateAdminRequest, CreateUserRequest
    from apps.volunteers.application.users.ports import (
        UsersCommandGateway,
        UsersQueryGateway,
    )

logger = logging.getLogger(__name__)


class UserRegistrar:
    """사용자 생성 서비스.

    Collaborators:
        - UsersQueryGateway: 중복 검사
        - UsersCommandGateway: 저장
        - PasswordHasher: 비밀번호 해시
    """

    def __init__(
        self,
        query_gateway: "UsersQueryGateway",
        command_gateway: "UsersCommandGateway",
        password_hasher: "PasswordHasher",
    ) -> None:
        self._query_gateway = query_gateway
        self._command_gateway = command_gateway
        self._password_hasher = password_hasher

    async def register(self, request: "CreateUserRequest") -> User:
        """일반 사용자(recipient, volunteer)를 생성합니다.

        Raises:
            ForbiddenError: admin/master 역할 요청
            LoginAlreadyExistsError: login 또는 vk_id 중복
        """
        UserPolicy.ensure_can_register(request.role)
        user = User(
            login=request.login,
            password=await self._hash_or_none(request.password),
            fullname=request.fullname,
            role=request.role,
            phone=request.phone,
            address=request.address,
            avatar=request.avatar,
            vk=request.vk,
            vk_id=request.vk_id,
            coordinates=list(request.coordinates),
        )
        return await self._save_new(user)

    async def register_admin(self, request: "CreateAdminRequest") -> User:
        """관리자를 생성합니다. 관리자 계정은 activated 상태로 시작합니다.

        Raises:
            ForbiddenError: recipient/volunteer 역할 요청
            LoginAlreadyExistsError: login 중복
        """
        UserPolicy.ensure_can_create_admin(request.role)
        user = User(
            login=request.login,
            password=await self._password_hasher.hash(request.password),
            fullname=request.fullname,
            role=request.role,
            phone=request.phone,
            status=UserStatus.ACTIVATED,
            permissions=list(dict.fromkeys(request.permissions)),
        )
        return await self._save_new(user)

    async def _hash_or_none(self, password: str | None) -> str | None:
        # VK 전용 계정은 비밀번호가 없으므로 비밀번호 로그인 불가
        if not password:
            return None
        return await self._password_hasher.hash(password)

    async def _save_new(self, user: User) -> User:
        if user.login and await self._query_gateway.get_by_login(user.login) is not None:
            raise LoginAlreadyExistsError()
        if user.vk_id is not None and await self._query_gateway.get_by_vk_id(user.vk_id):
            raise LoginAlreadyExistsError("User with this VK account already exists")

        saved = await self._command_gateway.add(user)
        logger.info(
            "User created",
            extra={"user_id": str(saved.id), "role": saved.role.value},
        )
        return saved
