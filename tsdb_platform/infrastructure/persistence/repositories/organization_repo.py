"""Organization repository. Returns application DTOs."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tsdb_platform.application.dtos.organization import OrganizationResult
from tsdb_platform.domain.exceptions import (
    EmptyValueException,
    OrganizationAlreadyExistsException,
)
from tsdb_platform.infrastructure.persistence.models.organization import Organization
from tsdb_platform.infrastructure.persistence.repositories.base import BaseRepository


def _org_to_result(o: Organization) -> OrganizationResult:
    return OrganizationResult(id=o.id, name=o.name)


class OrganizationRepository(BaseRepository[Organization]):
    """Organization repository. Names are unique across the instance."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Organization)

    async def create_organization(self, name: str) -> OrganizationResult:
        """Create organization; raise OrganizationAlreadyExistsException on duplicate name."""
        if not name:
            raise EmptyValueException("name", "organization name is empty")
        try:
            created = await self.create(Organization(name=name))
        except IntegrityError:
            raise OrganizationAlreadyExistsException(name) from None
        return _org_to_result(created)

    async def get_by_id(self, org_id: str) -> OrganizationResult | None:
        org = await self.get_entity_by_id(org_id)
        return _org_to_result(org) if org else None

    async def get_by_name(self, name: str) -> OrganizationResult | None:
        result = await self.db.execute(select(Organization).where(Organization.name == name))
        org = result.scalar_one_or_none()
        return _org_to_result(org) if org else None
