"""Transaction manager port."""

from __future__ import annotations

from typing import Protocol


class TransactionManager(Protocol):
    """트랜잭션 관리 포트.

    커밋하지 않은 변경은 요청 세션 종료 시 폐기됩니다.
    """

    async def commit(self) -> None:
        """트랜잭션을 커밋합니다."""
        ...
