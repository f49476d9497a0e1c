"""UsersQueryGateway Port.

사용자 읽기 작업을 위한 Gateway 인터페이스입니다.
"""

from typing import Protocol
from uuid import UUID

from apps.volunteers.domain.entities import User


class UsersQueryGateway(Protocol):
    """사용자 Query Gateway (읽기 작업).

    구현체:
        - SqlaUsersQueryGateway (infrastructure/persistence_postgres/adapters/)
    """

    async def get_by_id(self, user_id: UUID) -> User | None:
        """ID로 사용자 조회."""
        ...

    async def get_by_login(self, login: str) -> User | None:
        """login으로 사용자 조회."""
        ...

    async def get_by_fullname(self, fullname: str) -> User | None:
        """이름으로 사용자 조회 (첫 번째 일치)."""
        ...

    async def get_by_vk_id(self, vk_id: int) -> User | None:
        """VK 사용자 ID로 조회."""
        ...

    async def list_all(self) -> list[User]:
        """전체 사용자 목록 (생성순)."""
        ...
