"""Tests for SqlOnboardingService: commit first, then mirror the flag."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy.exc import OperationalError

from tsdb_platform.application.dtos.onboarding import OnboardingRequest
from tsdb_platform.domain.exceptions import ConflictException
from tsdb_platform.infrastructure.kv import RedisOnboardingStatusStore
from tsdb_platform.infrastructure.persistence.onboarding import SqlOnboardingService


def _request() -> OnboardingRequest:
    return OnboardingRequest(user="admin", password="pw123", org="acme", bucket="default")


def _session_scope(events: list[str], commit_error: Exception | None = None):
    @asynccontextmanager
    async def scope():
        yield MagicMock(name="session")
        if commit_error is not None:
            events.append("rollback")
            raise commit_error
        events.append("commit")

    return scope


def _redis_mirror(events: list[str]) -> tuple[RedisOnboardingStatusStore, AsyncMock]:
    client = AsyncMock()

    async def record_set(key, value):
        events.append(f"redis:{value}")

    client.set.side_effect = record_set
    return RedisOnboardingStatusStore(client, key_prefix="tsdb:"), client


async def test_generate_mirrors_flag_after_commit() -> None:
    events: list[str] = []
    inner = AsyncMock()
    inner.generate.return_value = "result"
    mirror, client = _redis_mirror(events)
    svc = SqlOnboardingService(
        status_mirror=mirror,
        session_scope=_session_scope(events),
        service_factory=lambda db: inner,
    )

    assert await svc.generate(_request()) == "result"
    assert events == ["commit", "redis:true"]
    client.set.assert_awaited_once_with("tsdb:onboarding_key", "true")


async def test_failed_commit_leaves_mirror_untouched() -> None:
    events: list[str] = []
    inner = AsyncMock()
    mirror, client = _redis_mirror(events)
    svc = SqlOnboardingService(
        status_mirror=mirror,
        session_scope=_session_scope(
            events, OperationalError("COMMIT", {}, Exception("connection lost"))
        ),
        service_factory=lambda db: inner,
    )

    with pytest.raises(OperationalError):
        await svc.generate(_request())
    inner.generate.assert_awaited_once()
    assert events == ["rollback"]
    client.set.assert_not_awaited()


async def test_generate_error_skips_mirror() -> None:
    events: list[str] = []
    inner = AsyncMock()
    inner.generate.side_effect = ConflictException("onboarding has already been completed")
    mirror, client = _redis_mirror(events)
    svc = SqlOnboardingService(
        status_mirror=mirror,
        session_scope=_session_scope(events),
        service_factory=lambda db: inner,
    )

    with pytest.raises(ConflictException):
        await svc.generate(_request())
    client.set.assert_not_awaited()


async def test_mirror_failure_after_commit_still_returns_result(caplog) -> None:
    inner = AsyncMock()
    inner.generate.return_value = "result"
    client = AsyncMock()
    client.set.side_effect = RedisConnectionError("down")
    svc = SqlOnboardingService(
        status_mirror=RedisOnboardingStatusStore(client),
        session_scope=_session_scope([]),
        service_factory=lambda db: inner,
    )

    assert await svc.generate(_request()) == "result"
    assert "mirror update" in caplog.text


async def test_reads_flag_from_sql_not_mirror() -> None:
    inner = AsyncMock()
    inner.is_onboarding.return_value = True
    client = AsyncMock()
    svc = SqlOnboardingService(
        status_mirror=RedisOnboardingStatusStore(client),
        session_scope=_session_scope([]),
        service_factory=lambda db: inner,
    )

    assert await svc.is_onboarding() is True
    client.get.assert_not_awaited()


async def test_put_onboarding_status_without_mirror() -> None:
    events: list[str] = []
    inner = AsyncMock()
    svc = SqlOnboardingService(session_scope=_session_scope(events), service_factory=lambda db: inner)

    await svc.put_onboarding_status(False)
    inner.put_onboarding_status.assert_awaited_once_with(False)
    assert events == ["commit"]
