"""Process-local (in-memory) implementations of the repository ports."""

from tsdb_platform.infrastructure.inmem.authorizations import InMemoryAuthorizationRepository
from tsdb_platform.infrastructure.inmem.backend import InMemoryBackend
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

__all__ = [
    "InMemoryAuthorizationRepository",
    "InMemoryBackend",
    "InMemoryBucketRepository",
    "InMemoryNotificationEndpointRepository",
    "InMemoryOnboardingStatusStore",
    "InMemoryOrganizationRepository",
    "InMemoryPasswordStore",
    "InMemorySecretStore",
    "InMemoryUserRepository",
]
