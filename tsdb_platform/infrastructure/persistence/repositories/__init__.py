"""SQL repositories returning application DTOs."""

from tsdb_platform.infrastructure.persistence.repositories.authorization_repo import (
    AuthorizationRepository,
)
from tsdb_platform.infrastructure.persistence.repositories.bucket_repo import BucketRepository
from tsdb_platform.infrastructure.persistence.repositories.onboarding_status_repo import (
    SqlOnboardingStatusStore,
)
from tsdb_platform.infrastructure.persistence.repositories.organization_repo import (
    OrganizationRepository,
)
from tsdb_platform.infrastructure.persistence.repositories.user_repo import (
    PasswordStore,
    UserRepository,
)

__all__ = [
    "AuthorizationRepository",
    "BucketRepository",
    "OrganizationRepository",
    "PasswordStore",
    "SqlOnboardingStatusStore",
    "UserRepository",
]
