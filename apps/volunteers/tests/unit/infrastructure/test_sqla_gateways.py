"""SQLAlchemy Gateway 단위 테스트.

AsyncSession은 mock으로 대체하고, 예외 변환과 세션 호출만 검증합니다.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from apps.volunteers.domain.entities import Token
from apps.volunteers.domain.exceptions import LoginAlreadyExistsError
from apps.volunteers.infrastructure.persistence_postgres.adapters import (
    SqlaTokensCommandGateway,
    SqlaTransactionManager,
    SqlaUsersCommandGateway,
)


@pytest.fixture
def session() -> MagicMock:
    mock = MagicMock()
    mock.flush = AsyncMock()
    mock.commit = AsyncMock()
    mock.rollback = AsyncMock()
    mock.execute = AsyncMock()
    mock.merge = AsyncMock(side_effect=lambda entity: entity)
    return mock


class TestSqlaUsersCommandGateway:
    @pytest.mark.asyncio
    async def test_add_flushes(self, session: MagicMock, make_user) -> None:
        user = make_user(login="anna")

        saved = await SqlaUsersCommandGateway(session).add(user)

        assert saved is user
        session.add.assert_called_once_with(user)
        session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unique_violation_translated(self, session: MagicMock, make_user) -> None:
        session.flush.side_effect = IntegrityError(
            "INSERT INTO volunteers.users", {}, Exception("duplicate key value")
        )

        with pytest.raises(LoginAlreadyExistsError):
            await SqlaUsersCommandGateway(session).add(make_user(login="anna"))

    @pytest.mark.asyncio
    async def test_update_merges(self, session: MagicMock, make_user) -> None:
        user = make_user()

        await SqlaUsersCommandGateway(session).update(user)

        session.merge.assert_awaited_once_with(user)
        session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_executes_statement(self, session: MagicMock, make_user) -> None:
        await SqlaUsersCommandGateway(session).delete(make_user().id)

        session.execute.assert_awaited_once()
        session.flush.assert_awaited_once()


class TestSqlaTokensCommandGateway:
    @pytest.mark.asyncio
    async def test_add(self, session: MagicMock, make_user) -> None:
        token = Token(token="vk-access", expires_in=0, user_id=make_user().id)

        await SqlaTokensCommandGateway(session).add(token)

        session.add.assert_called_once_with(token)


class TestSqlaTransactionManager:
    @pytest.mark.asyncio
    async def test_delegates_to_session(self, session: MagicMock) -> None:
        tx = SqlaTransactionManager(session)

        await tx.commit()

        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()
