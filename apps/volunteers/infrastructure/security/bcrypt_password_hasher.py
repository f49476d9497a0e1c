"""Bcrypt Password Hasher.

PasswordHasher 포트의 구현체입니다.
bcrypt는 CPU 바운드 동기 함수이므로 thread pool에서 실행합니다.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt는 72바이트까지만 사용
BCRYPT_MAX_PASSWORD_BYTES = 72


@lru_cache
def _dummy_hash(rounds: int) -> bytes:
    # 해시가 없는 계정도 같은 cost로 검증
    return bcrypt.hashpw(b"dummy-password", bcrypt.gensalt(rounds=rounds))


class BcryptPasswordHasher:
    """bcrypt 기반 비밀번호 해시."""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self._hash_sync, password)

    async def verify(self, password: str, password_hash: str | None) -> bool:
        return await asyncio.to_thread(self._verify_sync, password, password_hash)

    def _hash_sync(self, password: str) -> str:
        password_bytes = password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]
        hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode("utf-8")

    def _verify_sync(self, password: str, password_hash: str | None) -> bool:
        password_bytes = password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]
        if not password_hash:
            bcrypt.checkpw(password_bytes, _dummy_hash(self._rounds))
            return False
        try:
            return bcrypt.checkpw(password_bytes, password_hash.encode("utf-8"))
        except ValueError:
            # 저장된 해시 형식이 bcrypt가 아님
            logger.warning("Stored password hash has invalid format")
            return False
