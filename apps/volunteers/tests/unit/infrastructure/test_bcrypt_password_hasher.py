"""BcryptPasswordHasher 단위 테스트."""

import asyncio
import time

import pytest

from apps.volunteers.infrastructure.security import BcryptPasswordHasher


class TestBcryptPasswordHasher:
    @pytest.fixture
    def hasher(self) -> BcryptPasswordHasher:
        # 최소 비용으로 테스트 속도 확보
        return BcryptPasswordHasher(rounds=4)

    @pytest.mark.asyncio
    async def test_hash_is_not_plaintext(self, hasher: BcryptPasswordHasher) -> None:
        hashed = await hasher.hash("s3cret")

        assert hashed != "s3cret"
        assert hashed.startswith("$2")

    @pytest.mark.asyncio
    async def test_salted(self, hasher: BcryptPasswordHasher) -> None:
        assert await hasher.hash("s3cret") != await hasher.hash("s3cret")

    @pytest.mark.asyncio
    async def test_verify(self, hasher: BcryptPasswordHasher) -> None:
        hashed = await hasher.hash("s3cret")

        assert await hasher.verify("s3cret", hashed) is True
        assert await hasher.verify("wrong", hashed) is False

    @pytest.mark.asyncio
    async def test_invalid_hash_format(self, hasher: BcryptPasswordHasher) -> None:
        assert await hasher.verify("s3cret", "plaintext-password") is False
        assert await hasher.verify("s3cret", "") is False

    @pytest.mark.asyncio
    async def test_missing_hash_never_matches(self, hasher: BcryptPasswordHasher) -> None:
        assert await hasher.verify("dummy-password", None) is False

    @pytest.mark.asyncio
    async def test_long_password_truncated_to_72_bytes(
        self, hasher: BcryptPasswordHasher
    ) -> None:
        prefix = "a" * 72
        hashed = await hasher.hash(prefix + "tail-one")

        assert await hasher.verify(prefix + "tail-two", hashed) is True


class TestBcryptPasswordHasherConcurrency:
    """해시 계산 중에도 이벤트 루프가 멈추지 않는지 검증."""

    @pytest.mark.asyncio
    async def test_verify_does_not_block_event_loop(self) -> None:
        hasher = BcryptPasswordHasher(rounds=12)
        hashed = await hasher.hash("s3cret")
        max_gap = 0.0
        done = asyncio.Event()

        async def ticker() -> None:
            nonlocal max_gap
            last = time.perf_counter()
            while not done.is_set():
                await asyncio.sleep(0.005)
                now = time.perf_counter()
                max_gap = max(max_gap, now - last)
                last = now

        task = asyncio.create_task(ticker())
        await asyncio.sleep(0)
        try:
            assert await hasher.verify("s3cret", hashed) is True
        finally:
            done.set()
            await task

        assert max_gap < 0.1
