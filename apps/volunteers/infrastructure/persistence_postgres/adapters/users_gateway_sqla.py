"""SQLAlchemy implementation of user gateways."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.volunteers.domain.entities.user import User
from apps.volunteers.domain.exceptions import LoginAlreadyExistsError
from apps.volunteers.infrastructure.persistence_postgres.mappings.users import users_table

logger = logging.getLogger(__name__)


class SqlaUsersQueryGateway:
    """사용자 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: UUID) -> User | None:
        """사용자 ID로 조회합니다."""
        result = await self._session.execute(
            select(User).where(users_table.c.id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_by_login(self, login: str) -> User | None:
        result = await self._session.execute(
            select(User).where(users_table.c.login == login)
        )
        return result.scalar_one_or_none()

    async def get_by_fullname(self, fullname: str) -> User | None:
        """이름이 같은 사용자가 여럿이면 가장 먼저 가입한 사용자를 반환합니다."""
        result = await self._session.execute(
            select(User)
            .where(users_table.c.fullname == fullname)
            .order_by(users_table.c.created_at)
            .limit(1)
        )
        return result.scalars().first()

    async def get_by_vk_id(self, vk_id: int) -> User | None:
        result = await self._session.execute(
            select(User).where(users_table.c.vk_id == vk_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[User]:
        result = await self._session.execute(
            select(User).order_by(users_table.c.created_at)
        )
        return list(result.scalars().all())


class SqlaUsersCommandGateway:
    """사용자 수정 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, user: User) -> User:
        """새 사용자를 생성합니다.

        Raises:
            LoginAlreadyExistsError: login/vk_id 유니크 제약 위반
        """
        self._session.add(user)
        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning(
                "User unique constraint violated",
                extra={"user_id": str(user.id), "error": str(e.orig)},
            )
            raise LoginAlreadyExistsError() from e
        return user

    async def update(self, user: User) -> User:
        """사용자 정보를 업데이트합니다."""
        merged = await self._session.merge(user)
        await self._session.flush()
        return merged

    async def delete(self, user_id: UUID) -> None:
        """사용자를 삭제합니다. 토큰은 FK CASCADE로 함께 삭제됩니다."""
        await self._session.execute(
            delete(users_table).where(users_table.c.id == user_id)
        )
        await self._session.flush()
