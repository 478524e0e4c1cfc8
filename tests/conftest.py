"""Pytest configuration and fixtures for tsdb-platform.

HTTP tests build a fresh app per test (in-memory backend, so every test
starts un-onboarded). DB fixtures need DATABASE_BACKEND=postgres and
DATABASE_URL and skip otherwise.
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tsdb_platform.core.config import get_settings
from tsdb_platform.infrastructure.inmem import InMemoryBackend

# Postgres settings are only honoured by the requires_db fixtures below.
_POSTGRES_URL = os.environ.get("DATABASE_URL", "")
os.environ["DATABASE_BACKEND"] = "memory"
os.environ["ONBOARDING_STATUS_BACKEND"] = "database"
os.environ["TELEMETRY_ENABLED"] = "false"
get_settings.cache_clear()


@pytest.fixture
def backend() -> InMemoryBackend:
    """Empty in-memory backend."""
    return InMemoryBackend()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against a freshly built FastAPI app (ASGI)."""
    from tsdb_platform.main import create_app

    get_settings.cache_clear()
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(monkeypatch: pytest.MonkeyPatch) -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Use @pytest.mark.requires_db on tests that take this fixture; run
    without a database via: pytest -m 'not requires_db'.
    """
    if not _POSTGRES_URL:
        pytest.skip("Postgres not configured: set DATABASE_URL (postgresql+asyncpg://...)")
    from tsdb_platform.infrastructure.persistence import database

    monkeypatch.setenv("DATABASE_BACKEND", "postgres")
    monkeypatch.setenv("DATABASE_URL", _POSTGRES_URL)
    get_settings.cache_clear()
    await database.init_models()
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
    await database.dispose_engine()
    get_settings.cache_clear()
