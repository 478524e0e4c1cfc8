"""Tests for notification endpoint entities: validation, documents, updates, responses."""

import httpx
import pytest

from tsdb_platform.domain.entities.notification_endpoint import (
    HTTPNotificationEndpoint,
    NotificationEndpointUpdate,
    PagerDutyNotificationEndpoint,
    SecretField,
    SlackNotificationEndpoint,
    endpoint_from_dict,
)
from tsdb_platform.domain.enums import Status
from tsdb_platform.domain.exceptions import (
    InvalidException,
    InvalidNotificationEndpointTypeException,
    NotificationDeliveryException,
)


def _slack(**overrides) -> SlackNotificationEndpoint:
    fields = {"name": "alerts", "url": "https://hooks.slack.com/services/x"}
    fields.update(overrides)
    return SlackNotificationEndpoint(**fields)


def test_type_tags() -> None:
    assert _slack().type == "slack"
    assert PagerDutyNotificationEndpoint(name="pd", client_url="https://pd.example").type == "pagerduty"
    assert HTTPNotificationEndpoint(name="h", url="https://example.com").type == "http"


def test_valid_requires_name_and_url() -> None:
    _slack().valid()
    with pytest.raises(InvalidException, match="Name can't be empty"):
        _slack(name="").valid()
    with pytest.raises(InvalidException) as exc_info:
        _slack(url="not a url").valid()
    assert exc_info.value.details == {"field": "url"}


def test_pagerduty_requires_routing_key() -> None:
    endpoint = PagerDutyNotificationEndpoint(name="pd", client_url="https://pd.example")
    with pytest.raises(InvalidException, match="routing key"):
        endpoint.valid()
    endpoint.routing_key = SecretField(value="rk")
    endpoint.valid()


@pytest.mark.parametrize(
    ("kwargs", "field"),
    [
        ({"method": "DELETE"}, "method"),
        ({"auth_method": "digest"}, "auth_method"),
        ({"auth_method": "basic", "password": SecretField(value="p")}, "username"),
        ({"auth_method": "basic", "username": SecretField(value="u")}, "password"),
        ({"auth_method": "bearer"}, "token"),
    ],
)
def test_http_endpoint_config_errors(kwargs: dict, field: str) -> None:
    endpoint = HTTPNotificationEndpoint(name="h", url="https://example.com", **kwargs)
    with pytest.raises(InvalidException) as exc_info:
        endpoint.valid()
    assert exc_info.value.details == {"field": field}


def test_to_dict_hides_secret_values() -> None:
    endpoint = _slack(id="e1", org_id="o1", token=SecretField(key="e1-token", value="xoxb"))
    doc = endpoint.to_dict()
    assert doc["type"] == "slack"
    assert doc["orgID"] == "o1"
    assert doc["status"] == "active"
    assert doc["token"] == {"key": "e1-token"}
    assert "xoxb" not in str(doc)


def test_endpoint_from_dict_selects_variant() -> None:
    original = HTTPNotificationEndpoint(
        id="e1",
        org_id="o1",
        name="hook",
        url="https://example.com/hook",
        method="PUT",
        auth_method="bearer",
        token=SecretField(key="e1-token"),
        headers={"X-A": "1"},
    )
    parsed = endpoint_from_dict(original.to_dict())
    assert isinstance(parsed, HTTPNotificationEndpoint)
    assert parsed.method == "PUT"
    assert parsed.token == SecretField(key="e1-token")
    assert parsed.headers == {"X-A": "1"}


@pytest.mark.parametrize("doc", [{}, {"type": "carrier-pigeon"}, {"type": 3}])
def test_endpoint_from_dict_unknown_type(doc: dict) -> None:
    with pytest.raises(InvalidNotificationEndpointTypeException) as exc_info:
        endpoint_from_dict(doc)
    assert exc_info.value.message == "unknown notification endpoint type"


def test_from_dict_accepts_plain_secret_strings() -> None:
    endpoint = endpoint_from_dict(
        {"type": "pagerduty", "name": "pd", "clientURL": "https://pd.example", "routingKey": "rk"}
    )
    assert endpoint.routing_key == SecretField(value="rk")


def test_backfill_secret_keys() -> None:
    endpoint = HTTPNotificationEndpoint(
        id="e1",
        name="h",
        url="https://example.com",
        auth_method="basic",
        username=SecretField(value="u"),
        password=SecretField(key="custom", value="p"),
    )
    endpoint.backfill_secret_keys()
    assert endpoint.username.key == "e1-username"
    assert endpoint.password.key == "custom"
    assert [s.key for s in endpoint.secret_fields()] == ["e1-username", "custom"]


def test_update_applies_and_bumps_updated_at() -> None:
    endpoint = _slack()
    endpoint.update(NotificationEndpointUpdate(name="renamed", status="inactive"))
    assert endpoint.name == "renamed"
    assert endpoint.status is Status.INACTIVE
    assert endpoint.updated_at is not None


@pytest.mark.parametrize(
    "update",
    [
        NotificationEndpointUpdate(name=""),
        NotificationEndpointUpdate(description=""),
        NotificationEndpointUpdate(status="paused"),
    ],
)
def test_update_rejects_invalid_changes(update: NotificationEndpointUpdate) -> None:
    endpoint = _slack()
    with pytest.raises(InvalidException):
        endpoint.update(update)
    assert endpoint.name == "alerts"


def test_parse_response_generic() -> None:
    endpoint = HTTPNotificationEndpoint(name="h", url="https://example.com")
    endpoint.parse_response(httpx.Response(204))
    with pytest.raises(NotificationDeliveryException) as exc_info:
        endpoint.parse_response(httpx.Response(500, text="oops"))
    assert exc_info.value.details["status_code"] == 500
    assert exc_info.value.details["body"] == "oops"


def test_parse_response_slack_ok_false() -> None:
    endpoint = _slack()
    endpoint.parse_response(httpx.Response(200, text="ok"))
    with pytest.raises(NotificationDeliveryException):
        endpoint.parse_response(httpx.Response(200, json={"ok": False, "error": "invalid_auth"}))


def test_parse_response_pagerduty_requires_202() -> None:
    endpoint = PagerDutyNotificationEndpoint(name="pd", client_url="https://pd.example")
    endpoint.parse_response(httpx.Response(202))
    with pytest.raises(NotificationDeliveryException):
        endpoint.parse_response(httpx.Response(200))


def test_from_dict_timestamps_are_utc() -> None:
    endpoint = endpoint_from_dict(
        {
            "type": "slack",
            "name": "alerts",
            "url": "https://hooks.slack.com/services/x",
            "createdAt": "2024-05-01T12:00:00",
            "updatedAt": "2024-05-01T14:00:00+02:00",
        }
    )
    assert endpoint.created_at.tzinfo is not None
    assert endpoint.created_at.hour == 12
    assert endpoint.updated_at.hour == 12
