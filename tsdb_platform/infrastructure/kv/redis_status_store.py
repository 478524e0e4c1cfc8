"""Onboarding flag stored in Redis.

Shared by every API process pointing at the same Redis, so the flag survives
restarts even when entities live in memory.
"""

from __future__ import annotations

import logging

import redis.asyncio as redis

from tsdb_platform.core.config import Settings
from tsdb_platform.core.constants import FLAG_FALSE, FLAG_TRUE, ONBOARDING_KEY

logger = logging.getLogger(__name__)


def create_redis_client(settings: Settings) -> redis.Redis:
    """Build an async Redis client from settings (no connection is opened yet)."""
    return redis.Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        password=(
            settings.redis_password.get_secret_value() if settings.redis_password else None
        ),
        decode_responses=True,
        socket_connect_timeout=5,
        socket_keepalive=True,
    )


class RedisOnboardingStatusStore:
    """String key '<prefix>onboarding_key' holding 'true' or 'false'.

    Redis errors are not caught: an unreachable Redis must not read as
    "not onboarded".
    """

    def __init__(self, redis_client: redis.Redis, key_prefix: str = "") -> None:
        self.redis = redis_client
        self.key = f"{key_prefix}{ONBOARDING_KEY}"

    async def is_onboarding_complete(self) -> bool:
        value = await self.redis.get(self.key)
        if isinstance(value, bytes):
            value = value.decode()
        return value == FLAG_TRUE

    async def set_onboarding_complete(self, value: bool) -> None:
        await self.redis.set(self.key, FLAG_TRUE if value else FLAG_FALSE)
        logger.debug("Onboarding flag %s set to %s", self.key, value)

    async def close(self) -> None:
        await self.redis.aclose()
