"""Authorization (token) repository. Returns application DTOs."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tsdb_platform.application.dtos.authorization import AuthorizationResult
from tsdb_platform.domain.enums import Status
from tsdb_platform.domain.exceptions import ResourceNotFoundException
from tsdb_platform.domain.value_objects import Permission
from tsdb_platform.infrastructure.persistence.models.authorization import Authorization
from tsdb_platform.infrastructure.persistence.models.organization import Organization
from tsdb_platform.infrastructure.persistence.models.user import User
from tsdb_platform.infrastructure.persistence.repositories.base import BaseRepository
from tsdb_platform.shared.utils import generate_token


def _auth_to_result(a: Authorization) -> AuthorizationResult:
    return AuthorizationResult(
        id=a.id,
        token=a.token,
        user_id=a.user_id,
        org_id=a.org_id,
        description=a.description,
        permissions=tuple(Permission.from_dict(p) for p in a.permissions),
        status=Status(a.status),
    )


class AuthorizationRepository(BaseRepository[Authorization]):
    """Authorization repository; permissions are stored as an ordered JSON list."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Authorization)

    async def create_authorization(
        self,
        user_id: str,
        org_id: str,
        permissions: Sequence[Permission],
        description: str,
    ) -> AuthorizationResult:
        """Issue a new token for user_id in org_id with the given permissions."""
        if await self.db.get(User, user_id) is None:
            raise ResourceNotFoundException("user", user_id)
        if await self.db.get(Organization, org_id) is None:
            raise ResourceNotFoundException("organization", org_id)
        auth = Authorization(
            token=generate_token(),
            user_id=user_id,
            org_id=org_id,
            description=description,
            status=Status.ACTIVE.value,
            permissions=[p.to_dict() for p in permissions],
        )
        created = await self.create(auth)
        return _auth_to_result(created)

    async def find_by_token(self, token: str) -> AuthorizationResult | None:
        result = await self.db.execute(select(Authorization).where(Authorization.token == token))
        auth = result.scalar_one_or_none()
        return _auth_to_result(auth) if auth else None
