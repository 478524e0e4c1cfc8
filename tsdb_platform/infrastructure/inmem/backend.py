"""Wiring for the process-local backend."""

from __future__ import annotations

from tsdb_platform.application.interfaces.repositories import IOnboardingStatusStore
from tsdb_platform.application.interfaces.services import INotificationEndpointService
from tsdb_platform.application.services.notification_endpoint_service import (
    NotificationEndpointService,
)
from tsdb_platform.application.services.onboarding_service import OnboardingService
from tsdb_platform.domain.permissions import PermissionFactory, new_permission_at_id
from tsdb_platform.infrastructure.inmem.authorizations import InMemoryAuthorizationRepository
from tsdb_platform.infrastructure.inmem.identity import (
    InMemoryPasswordStore,
    InMemoryUserRepository,
)
from tsdb_platform.infrastructure.inmem.notification_endpoints import (
    InMemoryNotificationEndpointRepository,
    InMemorySecretStore,
)
from tsdb_platform.infrastructure.inmem.onboarding import InMemoryOnboardingStatusStore
from tsdb_platform.infrastructure.inmem.tenancy import (
    InMemoryBucketRepository,
    InMemoryOrganizationRepository,
)


class InMemoryBackend:
    """All process-local stores, shared by every service built from this backend.

    status_store may be replaced (e.g. by the Redis flag store) while the
    entities stay in memory.
    """

    def __init__(self, status_store: IOnboardingStatusStore | None = None) -> None:
        self.status_store = status_store or InMemoryOnboardingStatusStore()
        self.users = InMemoryUserRepository()
        self.passwords = InMemoryPasswordStore(self.users)
        self.orgs = InMemoryOrganizationRepository()
        self.buckets = InMemoryBucketRepository(self.orgs)
        self.authorizations = InMemoryAuthorizationRepository(self.users, self.orgs)
        self.notification_endpoints = InMemoryNotificationEndpointRepository()
        self.secrets = InMemorySecretStore()

    def onboarding_service(
        self, permission_at_id: PermissionFactory = new_permission_at_id
    ) -> OnboardingService:
        return OnboardingService(
            status_store=self.status_store,
            user_repo=self.users,
            password_store=self.passwords,
            org_repo=self.orgs,
            bucket_repo=self.buckets,
            auth_repo=self.authorizations,
            permission_at_id=permission_at_id,
        )

    def notification_endpoint_service(self) -> INotificationEndpointService:
        return NotificationEndpointService(
            endpoint_repo=self.notification_endpoints,
            secret_store=self.secrets,
            org_repo=self.orgs,
        )
