"""Domain enumerations for the platform.

Enums represent fixed sets of domain values (resource kinds, actions, status).
Member order is significant for ResourceType and Action: permission sets are
built by iterating them.
"""

from enum import Enum


class ResourceType(str, Enum):
    """Kind of resource a permission grants access to."""

    AUTHORIZATIONS = "authorizations"
    BUCKETS = "buckets"
    DASHBOARDS = "dashboards"
    ORGS = "orgs"
    SOURCES = "sources"
    TASKS = "tasks"
    TELEGRAFS = "telegrafs"
    USERS = "users"
    VARIABLES = "variables"
    SCRAPERS = "scrapers"
    SECRETS = "secrets"
    LABELS = "labels"
    VIEWS = "views"
    DOCUMENTS = "documents"
    NOTIFICATION_RULES = "notificationRules"
    NOTIFICATION_ENDPOINTS = "notificationEndpoints"
    CHECKS = "checks"

    @classmethod
    def values(cls) -> list[str]:
        """Return all resource type values as strings."""
        return [rt.value for rt in cls]


class Action(str, Enum):
    """Action a permission allows on a resource."""

    READ = "read"
    WRITE = "write"


class Status(str, Enum):
    """Lifecycle status shared by users, authorizations, and notification endpoints."""

    ACTIVE = "active"
    INACTIVE = "inactive"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]
