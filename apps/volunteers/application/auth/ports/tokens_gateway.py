"""TokensCommandGateway Port."""

from typing import Protocol

from apps.volunteers.domain.entities import Token


class TokensCommandGateway(Protocol):
    """프로바이더 access token 저장소.

    구현체:
        - SqlaTokensCommandGateway (infrastructure/persistence_postgres/adapters/)
    """

    async def add(self, token: Token) -> None:
        ...
