"""Application lifespan: startup and shutdown.

Wiring of infrastructure only (SQL schema, client instrumentation, Redis
client close, engine dispose). Backends and tracing are set up in
create_app() so they exist even when the lifespan is not run (e.g. ASGI
test transports).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from tsdb_platform.core.config import get_settings
from tsdb_platform.shared.telemetry.telemetry import get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: SQL tables (postgres and db_create_tables), SQLAlchemy and
    Redis instrumentation (if telemetry is on). Shutdown order: Redis client
    close, telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()
    telemetry = get_telemetry()

    # ---- Startup ----
    if settings.database_backend == "postgres":
        from tsdb_platform.infrastructure.persistence import database

        if settings.db_create_tables:
            await database.init_models()
        if telemetry is not None:
            telemetry.instrument_sqlalchemy(database.get_engine())

    if telemetry is not None and settings.onboarding_status_backend == "redis":
        telemetry.instrument_redis()

    yield

    # ---- Shutdown ----
    redis_store = getattr(app.state, "redis_status_store", None)
    if redis_store is not None:
        await redis_store.close()
        logger.info("Redis client closed")

    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)

    if settings.database_backend == "postgres":
        from tsdb_platform.infrastructure.persistence import database

        await database.dispose_engine()
