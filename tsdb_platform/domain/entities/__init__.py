"""Domain entities."""

from tsdb_platform.domain.entities.notification_endpoint import (
    ENDPOINT_TYPES,
    HTTPNotificationEndpoint,
    NotificationEndpoint,
    NotificationEndpointUpdate,
    PagerDutyNotificationEndpoint,
    SecretField,
    SlackNotificationEndpoint,
    endpoint_from_dict,
)

__all__ = [
    "ENDPOINT_TYPES",
    "HTTPNotificationEndpoint",
    "NotificationEndpoint",
    "NotificationEndpointUpdate",
    "PagerDutyNotificationEndpoint",
    "SecretField",
    "SlackNotificationEndpoint",
    "endpoint_from_dict",
]
