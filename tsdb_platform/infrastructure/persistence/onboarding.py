"""Onboarding over the SQL repositories.

Each call runs in its own transaction. The onboarding flag is a kv_store row
written in the same transaction as the entities, so a failed commit leaves
the instance still onboarding. An optional Redis store mirrors the flag and
is written only after the commit succeeds.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from sqlalchemy.ext.asyncio import AsyncSession

from tsdb_platform.application.dtos.onboarding import OnboardingRequest, OnboardingResult
from tsdb_platform.application.interfaces.repositories import IOnboardingStatusStore
from tsdb_platform.application.interfaces.services import IOnboardingService
from tsdb_platform.application.services.onboarding_service import OnboardingService
from tsdb_platform.domain.permissions import PermissionFactory, new_permission_at_id
from tsdb_platform.infrastructure.persistence.database import transactional_session
from tsdb_platform.infrastructure.persistence.repositories import (
    AuthorizationRepository,
    BucketRepository,
    OrganizationRepository,
    PasswordStore,
    SqlOnboardingStatusStore,
    UserRepository,
)

logger = logging.getLogger(__name__)

SessionScope = Callable[[], AbstractAsyncContextManager[AsyncSession]]


def build_sql_onboarding_service(
    db: AsyncSession,
    permission_at_id: PermissionFactory = new_permission_at_id,
) -> OnboardingService:
    """Onboarding service over SQL repositories bound to one session."""
    return OnboardingService(
        status_store=SqlOnboardingStatusStore(db),
        user_repo=UserRepository(db),
        password_store=PasswordStore(db),
        org_repo=OrganizationRepository(db),
        bucket_repo=BucketRepository(db),
        auth_repo=AuthorizationRepository(db),
        permission_at_id=permission_at_id,
    )


class SqlOnboardingService:
    """IOnboardingService that commits before returning.

    The SQL flag row is authoritative. The mirror is best-effort: once the
    transaction has committed, a mirror failure is logged and the result is
    still returned, because the token only exists in that result.
    """

    def __init__(
        self,
        status_mirror: IOnboardingStatusStore | None = None,
        session_scope: SessionScope = transactional_session,
        service_factory: Callable[[AsyncSession], IOnboardingService] = build_sql_onboarding_service,
    ) -> None:
        self.status_mirror = status_mirror
        self.session_scope = session_scope
        self.service_factory = service_factory

    async def is_onboarding(self) -> bool:
        async with self.session_scope() as db:
            return await self.service_factory(db).is_onboarding()

    async def put_onboarding_status(self, value: bool) -> None:
        async with self.session_scope() as db:
            await self.service_factory(db).put_onboarding_status(value)
        await self._mirror(value)

    async def generate(self, request: OnboardingRequest) -> OnboardingResult:
        async with self.session_scope() as db:
            result = await self.service_factory(db).generate(request)
        await self._mirror(True)
        return result

    async def _mirror(self, value: bool) -> None:
        if self.status_mirror is None:
            return
        try:
            await self.status_mirror.set_onboarding_complete(value)
        except Exception:
            logger.exception("Onboarding flag committed but mirror update to %s failed", value)
