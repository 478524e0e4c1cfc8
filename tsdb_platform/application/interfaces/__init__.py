"""Application ports (Protocols) implemented by infrastructure."""

from tsdb_platform.application.interfaces.repositories import (
    IAuthorizationRepository,
    IBucketRepository,
    INotificationEndpointRepository,
    IOnboardingStatusStore,
    IOrganizationRepository,
    IPasswordStore,
    ISecretStore,
    IUserRepository,
)
from tsdb_platform.application.interfaces.services import (
    INotificationEndpointService,
    IOnboardingService,
)

__all__ = [
    "IAuthorizationRepository",
    "IBucketRepository",
    "INotificationEndpointRepository",
    "INotificationEndpointService",
    "IOnboardingService",
    "IOnboardingStatusStore",
    "IOrganizationRepository",
    "IPasswordStore",
    "ISecretStore",
    "IUserRepository",
]
