"""Tests for RedisOnboardingStatusStore against a mocked async Redis client."""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from tsdb_platform.infrastructure.kv import RedisOnboardingStatusStore


@pytest.mark.parametrize(
    ("stored", "expected"),
    [(None, False), ("false", False), ("true", True), (b"true", True), ("garbage", False)],
)
async def test_reads_flag(stored, expected: bool) -> None:
    client = AsyncMock()
    client.get.return_value = stored
    store = RedisOnboardingStatusStore(client, key_prefix="tsdb:")

    assert await store.is_onboarding_complete() is expected
    client.get.assert_awaited_once_with("tsdb:onboarding_key")


async def test_writes_flag() -> None:
    client = AsyncMock()
    store = RedisOnboardingStatusStore(client)

    await store.set_onboarding_complete(True)
    await store.set_onboarding_complete(False)

    assert [c.args for c in client.set.await_args_list] == [
        ("onboarding_key", "true"),
        ("onboarding_key", "false"),
    ]


async def test_errors_propagate() -> None:
    client = AsyncMock()
    client.get.side_effect = RedisConnectionError("down")
    store = RedisOnboardingStatusStore(client)

    with pytest.raises(RedisConnectionError):
        await store.is_onboarding_complete()


async def test_close() -> None:
    client = AsyncMock()
    await RedisOnboardingStatusStore(client).close()
    client.aclose.assert_awaited_once()
