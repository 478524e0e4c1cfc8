"""Persistence models: ORM entities and mixins."""

from tsdb_platform.infrastructure.persistence.models.authorization import Authorization
from tsdb_platform.infrastructure.persistence.models.bucket import Bucket
from tsdb_platform.infrastructure.persistence.models.kv_store import KeyValue
from tsdb_platform.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin
from tsdb_platform.infrastructure.persistence.models.organization import Organization
from tsdb_platform.infrastructure.persistence.models.user import User, UserPassword

__all__ = [
    "Authorization",
    "Bucket",
    "CuidMixin",
    "KeyValue",
    "Organization",
    "TimestampMixin",
    "User",
    "UserPassword",
]
