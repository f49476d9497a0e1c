"""UsersCommandGateway Port."""

from typing import Protocol
from uuid import UUID

from apps.volunteers.domain.entities import User


class UsersCommandGateway(Protocol):
    """사용자 Command Gateway (쓰기 작업).

    구현체:
        - SqlaUsersCommandGateway (infrastructure/persistence_postgres/adapters/)
    """

    async def add(self, user: User) -> User:
        """새 사용자를 저장합니다.

        Raises:
            LoginAlreadyExistsError: login 또는 vk_id 중복
        """
        ...

    async def update(self, user: User) -> User:
        """변경된 사용자를 저장합니다."""
        ...

    async def delete(self, user_id: UUID) -> None:
        """사용자를 삭제합니다."""
        ...
