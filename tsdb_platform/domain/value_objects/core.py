"""Domain value objects for the platform.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass
from typing import Any

from tsdb_platform.domain.enums import Action, ResourceType
from tsdb_platform.domain.exceptions import InvalidException


def _validate_optional_id(value: str | None, field_name: str) -> None:
    """Raise InvalidException if value is set but not a non-empty string."""
    if value is None:
        return
    if not isinstance(value, str) or not value.strip():
        raise InvalidException(f"{field_name} must be a non-empty identifier", field=field_name)


@dataclass(frozen=True)
class Resource:
    """Target of a permission: a resource kind, optionally narrowed to one org and/or one id.

    Accepts plain strings for type (e.g. 'buckets') and coerces them to
    ResourceType; unknown kinds raise InvalidException.
    """

    type: ResourceType
    id: str | None = None
    org_id: str | None = None

    def __post_init__(self) -> None:
        try:
            resource_type = ResourceType(self.type)
        except ValueError:
            raise InvalidException(
                f"invalid resource type for permission: {self.type!r}", field="type"
            ) from None
        object.__setattr__(self, "type", resource_type)
        _validate_optional_id(self.id, "id")
        _validate_optional_id(self.org_id, "org_id")

    def __str__(self) -> str:
        parts = []
        if self.org_id is not None:
            parts.append(f"{ResourceType.ORGS.value}/{self.org_id}")
        parts.append(self.type.value)
        if self.id is not None:
            parts.append(self.id)
        return "/".join(parts)


@dataclass(frozen=True)
class Permission:
    """A single (action, resource) grant.

    Unscoped when resource.id and resource.org_id are both None; the string
    form is '<action>:<resource>' (e.g. 'write:orgs/o1/buckets/b1').
    """

    action: Action
    resource: Resource

    def __post_init__(self) -> None:
        try:
            action = Action(self.action)
        except ValueError:
            raise InvalidException(
                f"invalid action for permission: {self.action!r}", field="action"
            ) from None
        object.__setattr__(self, "action", action)
        if not isinstance(self.resource, Resource):
            raise InvalidException("permission resource is required", field="resource")

    def __str__(self) -> str:
        return f"{self.action.value}:{self.resource}"

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation."""
        resource: dict[str, object] = {"type": self.resource.type.value}
        if self.resource.id is not None:
            resource["id"] = self.resource.id
        if self.resource.org_id is not None:
            resource["orgID"] = self.resource.org_id
        return {"action": self.action.value, "resource": resource}

    @classmethod
    def from_dict(cls, doc: dict[str, Any]) -> "Permission":
        """Build a permission from the to_dict() form."""
        resource = doc.get("resource") or {}
        return cls(
            action=doc.get("action"),
            resource=Resource(
                type=resource.get("type"),
                id=resource.get("id"),
                org_id=resource.get("orgID"),
            ),
        )
