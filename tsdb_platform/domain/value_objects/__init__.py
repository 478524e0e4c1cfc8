"""Domain value objects and shared value types."""

from tsdb_platform.domain.value_objects.core import Permission, Resource

__all__ = [
    "Permission",
    "Resource",
]
