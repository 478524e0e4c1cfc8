"""Run first-run setup against the configured Postgres database.

Usage:
    python -m scripts.run_onboarding <username> <org> <bucket> [retention_hours]
The password is read from SETUP_PASSWORD, or prompted for when unset.
Prints the operator token once; it is not shown again.
"""

import asyncio
import getpass
import os
import sys

from tsdb_platform.application.dtos.onboarding import OnboardingRequest
from tsdb_platform.core.config import get_settings
from tsdb_platform.domain.exceptions import PlatformException
from tsdb_platform.infrastructure.kv import RedisOnboardingStatusStore, create_redis_client
from tsdb_platform.infrastructure.persistence import database
from tsdb_platform.infrastructure.persistence.onboarding import SqlOnboardingService
from tsdb_platform.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


def _usage() -> None:
    print(
        "Usage: python -m scripts.run_onboarding <username> <org> <bucket> [retention_hours]",
        file=sys.stderr,
    )
    sys.exit(1)


async def main() -> None:
    """Onboard once; exit 1 on usage errors or when setup was already done."""
    if len(sys.argv) < 4:
        _usage()
    username, org, bucket = sys.argv[1:4]
    settings = get_settings()
    setup_logging()
    retention = settings.default_retention_period_hours
    if len(sys.argv) > 4:
        try:
            retention = int(sys.argv[4])
        except ValueError:
            _usage()
    if settings.database_backend != "postgres":
        print("DATABASE_BACKEND=postgres is required", file=sys.stderr)
        sys.exit(1)
    password = os.environ.get("SETUP_PASSWORD") or getpass.getpass("Password: ")

    redis_store = None
    if settings.onboarding_status_backend == "redis":
        redis_store = RedisOnboardingStatusStore(
            create_redis_client(settings), key_prefix=settings.redis_key_prefix
        )
    try:
        if settings.db_create_tables:
            await database.init_models()
        service = SqlOnboardingService(status_mirror=redis_store)
        result = await service.generate(
            OnboardingRequest(
                user=username,
                password=password,
                org=org,
                bucket=bucket,
                retention_period_hours=retention,
            )
        )
    except PlatformException as e:
        print(f"Setup failed: {e.message}", file=sys.stderr)
        sys.exit(1)
    finally:
        if redis_store is not None:
            await redis_store.close()
        await database.dispose_engine()

    print(f"User: {result.user.id} ({result.user.name})")
    print(f"Organization: {result.org.id} ({result.org.name})")
    print(f"Bucket: {result.bucket.id} ({result.bucket.name})")
    print(f"Token: {result.auth.token}")


if __name__ == "__main__":
    asyncio.run(main())
