"""Tests for settings validation, the traced decorator and telemetry config."""

import pytest
from pydantic import ValidationError

from tsdb_platform.core.config import Settings
from tsdb_platform.shared.telemetry import (
    TelemetryConfig,
    add_span_attributes,
    get_telemetry,
    set_telemetry,
    traced,
)


def test_defaults_need_no_external_services() -> None:
    settings = Settings(_env_file=None)
    assert settings.database_backend == "memory"
    assert settings.onboarding_status_backend == "database"
    assert settings.default_retention_period_hours == 0


def test_postgres_requires_database_url() -> None:
    with pytest.raises(ValidationError, match="DATABASE_URL"):
        Settings(_env_file=None, database_backend="postgres", database_url="")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"database_backend": "mysql"},
        {"onboarding_status_backend": "etcd"},
        {"default_retention_period_hours": -1},
    ],
)
def test_rejects_bad_values(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **kwargs)


async def test_traced_async_passes_results_and_errors_through() -> None:
    @traced("test.ok")
    async def ok(value: int) -> int:
        add_span_attributes(value=value)
        return value * 2

    @traced()
    async def fail() -> None:
        raise KeyError("boom")

    assert await ok(value=21) == 42
    with pytest.raises(KeyError):
        await fail()


def test_traced_sync() -> None:
    @traced("test.sync")
    def add(a: int, b: int) -> int:
        return a + b

    assert add(1, b=2) == 3
    assert add.__name__ == "add"


def test_disabled_telemetry_is_noop() -> None:
    telemetry = TelemetryConfig("svc", "0.0.1", enabled=False)
    assert telemetry.setup_telemetry() is None
    telemetry.instrument_redis()
    telemetry.shutdown()


def test_global_telemetry_registry() -> None:
    telemetry = TelemetryConfig("svc", "0.0.1", enabled=False)
    set_telemetry(telemetry)
    try:
        assert get_telemetry() is telemetry
    finally:
        set_telemetry(None)
    assert get_telemetry() is None
