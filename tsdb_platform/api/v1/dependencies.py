"""Composition root for request-scoped services.

memory backend: services are built from the InMemoryBackend on app.state.
postgres backend: each service call runs in its own transaction and commits
before the endpoint returns. A configured Redis status store mirrors the
onboarding flag after the commit.
"""

from __future__ import annotations

from fastapi import Request

from tsdb_platform.application.interfaces.services import IOnboardingService
from tsdb_platform.core.config import get_settings
from tsdb_platform.infrastructure.persistence.onboarding import SqlOnboardingService


def get_onboarding_service(request: Request) -> IOnboardingService:
    """Onboarding service for the configured backend."""
    state = request.app.state
    if get_settings().database_backend == "memory":
        return state.backend.onboarding_service()
    return SqlOnboardingService(status_mirror=getattr(state, "redis_status_store", None))
