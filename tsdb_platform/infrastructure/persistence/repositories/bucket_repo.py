"""Bucket repository. Retention is stored as whole seconds."""

from datetime import timedelta

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tsdb_platform.application.dtos.bucket import BucketResult
from tsdb_platform.domain.exceptions import (
    BucketAlreadyExistsException,
    EmptyValueException,
    InvalidException,
    ResourceNotFoundException,
)
from tsdb_platform.infrastructure.persistence.models.bucket import Bucket
from tsdb_platform.infrastructure.persistence.models.organization import Organization
from tsdb_platform.infrastructure.persistence.repositories.base import BaseRepository


class BucketRepository(BaseRepository[Bucket]):
    """Bucket repository. Names are unique within an organization."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Bucket)

    async def create_bucket(
        self,
        org_id: str,
        organization: str,
        name: str,
        retention_period: timedelta,
    ) -> BucketResult:
        """Create bucket in org_id.

        Raises:
            ResourceNotFoundException: org_id does not exist.
            BucketAlreadyExistsException: org already has a bucket named name.
        """
        if not name:
            raise EmptyValueException("name", "bucket name is empty")
        if retention_period < timedelta(0):
            raise InvalidException(
                "retention period must be zero or positive", field="retention_period"
            )
        if await self.db.get(Organization, org_id) is None:
            raise ResourceNotFoundException("organization", org_id)
        bucket = Bucket(
            org_id=org_id,
            name=name,
            retention_seconds=int(retention_period.total_seconds()),
        )
        try:
            created = await self.create(bucket)
        except IntegrityError:
            raise BucketAlreadyExistsException(name, org_id) from None
        return BucketResult(
            id=created.id,
            org_id=created.org_id,
            organization=organization,
            name=created.name,
            retention_period=timedelta(seconds=created.retention_seconds),
        )
