"""DTOs for the onboarding (first-run setup) use case."""

from dataclasses import dataclass

from tsdb_platform.application.dtos.authorization import AuthorizationResult
from tsdb_platform.application.dtos.bucket import BucketResult
from tsdb_platform.application.dtos.organization import OrganizationResult
from tsdb_platform.application.dtos.user import UserResult


@dataclass(frozen=True)
class OnboardingRequest:
    """Setup parameters supplied by the operator. Consumed once, never persisted.

    retention_period_hours of 0 means infinite retention.
    """

    user: str
    password: str
    org: str
    bucket: str
    retention_period_hours: int = 0

    def __repr__(self) -> str:
        return (
            f"OnboardingRequest(user={self.user!r}, password='***', org={self.org!r}, "
            f"bucket={self.bucket!r}, retention_period_hours={self.retention_period_hours})"
        )


@dataclass(frozen=True)
class OnboardingResult:
    """Everything created by a successful onboarding."""

    user: UserResult
    org: OrganizationResult
    bucket: BucketResult
    auth: AuthorizationResult
