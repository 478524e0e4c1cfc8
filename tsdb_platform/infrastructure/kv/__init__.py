"""Key/value (Redis) backed stores."""

from tsdb_platform.infrastructure.kv.redis_status_store import (
    RedisOnboardingStatusStore,
    create_redis_client,
)

__all__ = ["RedisOnboardingStatusStore", "create_redis_client"]
