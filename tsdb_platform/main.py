"""FastAPI application entry point.

Wiring only: backend, telemetry, lifespan, exception handlers, middleware,
routers. Settings are loaded inside create_app() so that tests can set env
(and clear the get_settings cache) before calling create_app().
"""

import logging

from fastapi import FastAPI

from tsdb_platform.api.v1 import api_router
from tsdb_platform.core.config import Settings, get_settings
from tsdb_platform.core.exception_handlers import register_exception_handlers
from tsdb_platform.core.lifespan import create_lifespan
from tsdb_platform.infrastructure.inmem import InMemoryBackend
from tsdb_platform.infrastructure.kv import RedisOnboardingStatusStore, create_redis_client
from tsdb_platform.middleware import RequestIDMiddleware, TimeoutMiddleware
from tsdb_platform.shared.telemetry.logging import setup_logging
from tsdb_platform.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

logger = logging.getLogger(__name__)


def _configure_backend(app: FastAPI, settings: Settings) -> None:
    """Attach the storage backend to app.state."""
    redis_store = None
    if settings.onboarding_status_backend == "redis":
        redis_store = RedisOnboardingStatusStore(
            create_redis_client(settings), key_prefix=settings.redis_key_prefix
        )
    app.state.redis_status_store = redis_store
    app.state.backend = (
        InMemoryBackend(status_store=redis_store)
        if settings.database_backend == "memory"
        else None
    )
    logger.info(
        "Backend: entities=%s, onboarding flag=%s",
        settings.database_backend,
        settings.onboarding_status_backend,
    )


def _configure_telemetry(app: FastAPI, settings: Settings) -> None:
    """Install the tracer provider and instrument FastAPI (before the app starts)."""
    if not settings.telemetry_enabled:
        return
    telemetry = TelemetryConfig(
        service_name=settings.app_name,
        service_version=settings.app_version,
        enabled=True,
        environment=settings.telemetry_environment,
    )
    telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    set_telemetry(telemetry)
    telemetry.instrument_fastapi(app)


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    _configure_backend(app, settings)

    register_exception_handlers(app)

    # Last added = outermost. Order: timeout → request ID → app.
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    _configure_telemetry(app, settings)

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
