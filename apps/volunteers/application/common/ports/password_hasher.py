"""PasswordHasher Port."""

from typing import Protocol


class PasswordHasher(Protocol):
    """단방향 비밀번호 해시 포트.

    구현체:
        - BcryptPasswordHasher (infrastructure/security/)
    """

    async def hash(self, password: str) -> str:
        """비밀번호 해시를 생성합니다."""
        ...

    async def verify(self, password: str, password_hash: str | None) -> bool:
        """비밀번호와 해시를 비교합니다 (constant-time).

        password_hash가 None이어도 실제 해시와 같은 비용을 치르고 False를 반환합니다.
        """
        ...
