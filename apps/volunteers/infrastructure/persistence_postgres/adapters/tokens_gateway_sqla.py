"""SQLAlchemy implementation of token gateway."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from apps.volunteers.domain.entities.token import Token


class SqlaTokensCommandGateway:
    """프로바이더 토큰 저장 게이트웨이."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, token: Token) -> None:
        self._session.add(token)
        await self._session.flush()
