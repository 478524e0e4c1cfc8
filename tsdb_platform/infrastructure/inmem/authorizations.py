"""Process-local authorizations (tokens)."""

from __future__ import annotations

import threading
from collections.abc import Sequence

from tsdb_platform.application.dtos.authorization import AuthorizationResult
from tsdb_platform.domain.exceptions import ResourceNotFoundException
from tsdb_platform.domain.value_objects import Permission
from tsdb_platform.infrastructure.inmem.identity import InMemoryUserRepository
from tsdb_platform.infrastructure.inmem.tenancy import InMemoryOrganizationRepository
from tsdb_platform.shared.utils import generate_id, generate_token


class InMemoryAuthorizationRepository:
    """Authorizations keyed by ID; user and org must exist at creation time."""

    def __init__(
        self,
        user_repo: InMemoryUserRepository,
        org_repo: InMemoryOrganizationRepository,
    ) -> None:
        self.user_repo = user_repo
        self.org_repo = org_repo
        self._by_id: dict[str, AuthorizationResult] = {}
        self._lock = threading.Lock()

    async def create_authorization(
        self,
        user_id: str,
        org_id: str,
        permissions: Sequence[Permission],
        description: str,
    ) -> AuthorizationResult:
        if await self.user_repo.get_by_id(user_id) is None:
            raise ResourceNotFoundException("user", user_id)
        if await self.org_repo.get_by_id(org_id) is None:
            raise ResourceNotFoundException("organization", org_id)
        auth = AuthorizationResult(
            id=generate_id(),
            token=generate_token(),
            user_id=user_id,
            org_id=org_id,
            description=description,
            permissions=tuple(permissions),
        )
        with self._lock:
            self._by_id[auth.id] = auth
        return auth

    async def find_by_token(self, token: str) -> AuthorizationResult | None:
        with self._lock:
            return next((a for a in self._by_id.values() if a.token == token), None)

    async def list_all(self) -> list[AuthorizationResult]:
        with self._lock:
            return list(self._by_id.values())
