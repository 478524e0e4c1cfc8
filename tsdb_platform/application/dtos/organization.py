"""DTOs for organization use cases."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OrganizationResult:
    """Organization read-model."""

    id: str
    name: str
