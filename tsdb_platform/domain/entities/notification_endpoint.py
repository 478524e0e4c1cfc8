"""Notification endpoint domain entities.

A notification endpoint describes how to reach a third-party alerting sink
(Slack, PagerDuty, a generic HTTP webhook). Each variant validates itself,
serializes to a document tagged with its type, accepts partial updates,
lists its secret fields, and interprets the sink's HTTP response. Variants
are selected from a document's "type" tag by endpoint_from_dict.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar
from urllib.parse import urlparse

import httpx

from tsdb_platform.domain.enums import Status
from tsdb_platform.domain.exceptions import (
    InvalidException,
    InvalidNotificationEndpointTypeException,
    NotificationDeliveryException,
)
from tsdb_platform.shared.utils.datetime import ensure_utc, utc_now

SLACK_TYPE = "slack"
PAGERDUTY_TYPE = "pagerduty"
HTTP_TYPE = "http"

HTTP_METHODS = ("POST", "PUT", "GET")
HTTP_AUTH_NONE = "none"
HTTP_AUTH_BASIC = "basic"
HTTP_AUTH_BEARER = "bearer"
HTTP_AUTH_METHODS = (HTTP_AUTH_NONE, HTTP_AUTH_BASIC, HTTP_AUTH_BEARER)


def _validate_url(value: str, field_name: str) -> None:
    if not value:
        raise InvalidException(f"{field_name} is required", field=field_name)
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidException(f"{field_name} is not a valid http(s) URL", field=field_name)


def _parse_time(value: Any) -> datetime | None:
    if value is None:
        return None
    if not isinstance(value, datetime):
        value = datetime.fromisoformat(value)
    return ensure_utc(value)


@dataclass
class SecretField:
    """Reference to a secret stored outside the endpoint document.

    key is the secret store key; value is only populated on the way in
    (before the service moves it to the secret store) and is never serialized.
    """

    key: str | None = None
    value: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {"key": self.key}

    @classmethod
    def from_raw(cls, raw: Any) -> SecretField | None:
        """Accept None, a plain string value, or a {'key', 'value'} mapping."""
        if raw is None:
            return None
        if isinstance(raw, SecretField):
            return raw
        if isinstance(raw, str):
            return cls(value=raw)
        return cls(key=raw.get("key"), value=raw.get("value"))

    def is_set(self) -> bool:
        return bool(self.key) or bool(self.value)


@dataclass
class NotificationEndpointUpdate:
    """Partial-update changeset; None means 'leave unchanged'."""

    name: str | None = None
    description: str | None = None
    status: Status | str | None = None

    def valid(self) -> None:
        """Raise InvalidException if a provided field is unusable."""
        if self.name is not None and self.name == "":
            raise InvalidException("Notification Endpoint Name can't be empty", field="name")
        if self.description is not None and self.description == "":
            raise InvalidException(
                "Notification Endpoint Description can't be empty", field="description"
            )
        if self.status is not None and self.status not in Status.values():
            raise InvalidException(f"invalid status: {self.status!r}", field="status")


@dataclass(kw_only=True)
class NotificationEndpoint(ABC):
    """Common fields and behaviour of every notification endpoint variant."""

    endpoint_type: ClassVar[str]

    name: str
    id: str | None = None
    org_id: str | None = None
    description: str = ""
    status: Status = Status.ACTIVE
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def type(self) -> str:
        """Type tag carried alongside the serialized document."""
        return self.endpoint_type

    def valid(self) -> None:
        """Validate common fields, then variant-specific configuration.

        Raises:
            InvalidException: On the first invalid field.
        """
        if not self.name:
            raise InvalidException("Notification Endpoint Name can't be empty", field="name")
        if self.status not in Status.values():
            raise InvalidException(f"invalid status: {self.status!r}", field="status")
        self._validate_config()

    def update(self, upd: NotificationEndpointUpdate) -> None:
        """Apply a validated partial update in place and bump updated_at."""
        upd.valid()
        if upd.name is not None:
            self.name = upd.name
        if upd.description is not None:
            self.description = upd.description
        if upd.status is not None:
            self.status = Status(upd.status)
        self.updated_at = utc_now()

    def backfill_secret_keys(self) -> None:
        """Give every secret field without a key the '<endpoint id>-<name>' key."""
        for name, secret in self._secret_attrs().items():
            if secret is not None and not secret.key:
                secret.key = f"{self.id}-{name}"

    def secret_fields(self) -> list[SecretField]:
        """Return the secret fields that are set, in declaration order."""
        return [s for s in self._secret_attrs().values() if s is not None and s.is_set()]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a structured document (secrets appear by key only)."""
        doc: dict[str, Any] = {
            "id": self.id,
            "orgID": self.org_id,
            "name": self.name,
            "description": self.description,
            "status": Status(self.status).value,
            "type": self.type,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
        doc.update(self._config_to_dict())
        return doc

    def parse_response(self, response: httpx.Response) -> None:
        """Raise NotificationDeliveryException unless the sink accepted the delivery."""
        if not response.is_success:
            raise NotificationDeliveryException(self.type, response.status_code, response.text)

    @classmethod
    def _base_kwargs(cls, doc: dict[str, Any]) -> dict[str, Any]:
        return {
            "id": doc.get("id"),
            "org_id": doc.get("orgID"),
            "name": doc.get("name", ""),
            "description": doc.get("description", ""),
            "status": doc.get("status", Status.ACTIVE.value),
            "created_at": _parse_time(doc.get("createdAt")),
            "updated_at": _parse_time(doc.get("updatedAt")),
        }

    @classmethod
    @abstractmethod
    def from_dict(cls, doc: dict[str, Any]) -> NotificationEndpoint:
        """Build the variant from a document produced by to_dict (or an API payload)."""

    @abstractmethod
    def _validate_config(self) -> None: ...

    @abstractmethod
    def _config_to_dict(self) -> dict[str, Any]: ...

    @abstractmethod
    def _secret_attrs(self) -> dict[str, SecretField | None]: ...


@dataclass(kw_only=True)
class SlackNotificationEndpoint(NotificationEndpoint):
    """Slack incoming webhook. token is optional (for Slack apps posting via chat API)."""

    endpoint_type: ClassVar[str] = SLACK_TYPE

    url: str
    token: SecretField | None = None

    def _validate_config(self) -> None:
        _validate_url(self.url, "url")

    def _config_to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "token": self.token.to_dict() if self.token else None}

    def _secret_attrs(self) -> dict[str, SecretField | None]:
        return {"token": self.token}

    def parse_response(self, response: httpx.Response) -> None:
        # Slack answers 200 with {"ok": false, "error": ...} for chat API failures.
        super().parse_response(response)
        try:
            body = response.json()
        except (json.JSONDecodeError, ValueError):
            return
        if isinstance(body, dict) and body.get("ok") is False:
            raise NotificationDeliveryException(self.type, response.status_code, response.text)

    @classmethod
    def from_dict(cls, doc: dict[str, Any]) -> SlackNotificationEndpoint:
        return cls(
            **cls._base_kwargs(doc),
            url=doc.get("url", ""),
            token=SecretField.from_raw(doc.get("token")),
        )


@dataclass(kw_only=True)
class PagerDutyNotificationEndpoint(NotificationEndpoint):
    """PagerDuty Events API v2 integration."""

    endpoint_type: ClassVar[str] = PAGERDUTY_TYPE

    client_url: str
    routing_key: SecretField | None = None

    def _validate_config(self) -> None:
        _validate_url(self.client_url, "client_url")
        if self.routing_key is None or not self.routing_key.is_set():
            raise InvalidException("pagerduty routing key is required", field="routing_key")

    def _config_to_dict(self) -> dict[str, Any]:
        return {
            "clientURL": self.client_url,
            "routingKey": self.routing_key.to_dict() if self.routing_key else None,
        }

    def _secret_attrs(self) -> dict[str, SecretField | None]:
        return {"routing-key": self.routing_key}

    def parse_response(self, response: httpx.Response) -> None:
        # Events API v2 acknowledges with 202 only.
        if response.status_code != httpx.codes.ACCEPTED:
            raise NotificationDeliveryException(self.type, response.status_code, response.text)

    @classmethod
    def from_dict(cls, doc: dict[str, Any]) -> PagerDutyNotificationEndpoint:
        return cls(
            **cls._base_kwargs(doc),
            client_url=doc.get("clientURL", ""),
            routing_key=SecretField.from_raw(doc.get("routingKey")),
        )


@dataclass(kw_only=True)
class HTTPNotificationEndpoint(NotificationEndpoint):
    """Generic HTTP webhook with optional basic or bearer auth."""

    endpoint_type: ClassVar[str] = HTTP_TYPE

    url: str
    method: str = "POST"
    auth_method: str = HTTP_AUTH_NONE
    username: SecretField | None = None
    password: SecretField | None = None
    token: SecretField | None = None
    headers: dict[str, str] = field(default_factory=dict)
    content_template: str = ""

    def _validate_config(self) -> None:
        _validate_url(self.url, "url")
        if self.method not in HTTP_METHODS:
            raise InvalidException(f"invalid http method: {self.method!r}", field="method")
        if self.auth_method not in HTTP_AUTH_METHODS:
            raise InvalidException(
                f"invalid http auth method: {self.auth_method!r}", field="auth_method"
            )
        if self.auth_method == HTTP_AUTH_BASIC:
            for name, secret in (("username", self.username), ("password", self.password)):
                if secret is None or not secret.is_set():
                    raise InvalidException(
                        f"http endpoint basic auth requires {name}", field=name
                    )
        if self.auth_method == HTTP_AUTH_BEARER and (self.token is None or not self.token.is_set()):
            raise InvalidException("http endpoint bearer auth requires token", field="token")

    def _config_to_dict(self) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "url": self.url,
            "method": self.method,
            "authMethod": self.auth_method,
            "headers": dict(self.headers),
            "contentTemplate": self.content_template,
        }
        for name, secret in self._secret_attrs().items():
            doc[name] = secret.to_dict() if secret else None
        return doc

    def _secret_attrs(self) -> dict[str, SecretField | None]:
        return {"username": self.username, "password": self.password, "token": self.token}

    @classmethod
    def from_dict(cls, doc: dict[str, Any]) -> HTTPNotificationEndpoint:
        return cls(
            **cls._base_kwargs(doc),
            url=doc.get("url", ""),
            method=doc.get("method", "POST"),
            auth_method=doc.get("authMethod", HTTP_AUTH_NONE),
            username=SecretField.from_raw(doc.get("username")),
            password=SecretField.from_raw(doc.get("password")),
            token=SecretField.from_raw(doc.get("token")),
            headers=dict(doc.get("headers") or {}),
            content_template=doc.get("contentTemplate", ""),
        )


ENDPOINT_TYPES: dict[str, type[NotificationEndpoint]] = {
    SLACK_TYPE: SlackNotificationEndpoint,
    PAGERDUTY_TYPE: PagerDutyNotificationEndpoint,
    HTTP_TYPE: HTTPNotificationEndpoint,
}


def endpoint_from_dict(doc: dict[str, Any]) -> NotificationEndpoint:
    """Build the variant named by doc['type'].

    Raises:
        InvalidNotificationEndpointTypeException: Missing or unknown type tag.
    """
    endpoint_type = doc.get("type")
    endpoint_cls = ENDPOINT_TYPES.get(endpoint_type) if isinstance(endpoint_type, str) else None
    if endpoint_cls is None:
        raise InvalidNotificationEndpointTypeException(endpoint_type)
    return endpoint_cls.from_dict(doc)
