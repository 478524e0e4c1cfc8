"""Process-local organizations and buckets."""

from __future__ import annotations

import threading
from datetime import timedelta

from tsdb_platform.application.dtos.bucket import BucketResult
from tsdb_platform.application.dtos.organization import OrganizationResult
from tsdb_platform.domain.exceptions import (
    BucketAlreadyExistsException,
    EmptyValueException,
    InvalidException,
    OrganizationAlreadyExistsException,
    ResourceNotFoundException,
)
from tsdb_platform.shared.utils import generate_id


class InMemoryOrganizationRepository:
    """Organizations keyed by ID with a unique-name index."""

    def __init__(self) -> None:
        self._by_id: dict[str, OrganizationResult] = {}
        self._id_by_name: dict[str, str] = {}
        self._lock = threading.Lock()

    async def create_organization(self, name: str) -> OrganizationResult:
        if not name:
            raise EmptyValueException("name", "organization name is empty")
        with self._lock:
            if name in self._id_by_name:
                raise OrganizationAlreadyExistsException(name)
            org = OrganizationResult(id=generate_id(), name=name)
            self._by_id[org.id] = org
            self._id_by_name[name] = org.id
        return org

    async def get_by_id(self, org_id: str) -> OrganizationResult | None:
        with self._lock:
            return self._by_id.get(org_id)

    async def get_by_name(self, name: str) -> OrganizationResult | None:
        with self._lock:
            org_id = self._id_by_name.get(name)
            return self._by_id.get(org_id) if org_id else None

    async def list_all(self) -> list[OrganizationResult]:
        with self._lock:
            return list(self._by_id.values())


class InMemoryBucketRepository:
    """Buckets keyed by ID; names are unique within an organization."""

    def __init__(self, org_repo: InMemoryOrganizationRepository) -> None:
        self.org_repo = org_repo
        self._by_id: dict[str, BucketResult] = {}
        self._lock = threading.Lock()

    async def create_bucket(
        self,
        org_id: str,
        organization: str,
        name: str,
        retention_period: timedelta,
    ) -> BucketResult:
        if not name:
            raise EmptyValueException("name", "bucket name is empty")
        if retention_period < timedelta(0):
            raise InvalidException("retention period must be zero or positive", field="retention_period")
        if await self.org_repo.get_by_id(org_id) is None:
            raise ResourceNotFoundException("organization", org_id)
        with self._lock:
            if any(b.org_id == org_id and b.name == name for b in self._by_id.values()):
                raise BucketAlreadyExistsException(name, org_id)
            bucket = BucketResult(
                id=generate_id(),
                org_id=org_id,
                organization=organization,
                name=name,
                retention_period=retention_period,
            )
            self._by_id[bucket.id] = bucket
        return bucket

    async def list_all(self) -> list[BucketResult]:
        with self._lock:
            return list(self._by_id.values())
