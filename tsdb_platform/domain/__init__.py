"""Domain layer: entities, value objects, enums, permission sets, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from tsdb_platform.domain.enums import Action, ResourceType, Status
from tsdb_platform.domain.exceptions import (
    ConflictException,
    EmptyValueException,
    InvalidException,
    PlatformException,
    ResourceNotFoundException,
)
from tsdb_platform.domain.value_objects import Permission, Resource

__all__ = [
    # Enums
    "Action",
    "ResourceType",
    "Status",
    # Exceptions
    "ConflictException",
    "EmptyValueException",
    "InvalidException",
    "PlatformException",
    "ResourceNotFoundException",
    # Value objects
    "Permission",
    "Resource",
]
