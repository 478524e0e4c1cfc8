"""Application DTOs (read models and request objects, no ORM types)."""

from tsdb_platform.application.dtos.authorization import AuthorizationResult
from tsdb_platform.application.dtos.bucket import BucketResult
from tsdb_platform.application.dtos.notification_endpoint import (
    FindOptions,
    NotificationEndpointFilter,
)
from tsdb_platform.application.dtos.onboarding import OnboardingRequest, OnboardingResult
from tsdb_platform.application.dtos.organization import OrganizationResult
from tsdb_platform.application.dtos.user import UserResult

__all__ = [
    "AuthorizationResult",
    "BucketResult",
    "FindOptions",
    "NotificationEndpointFilter",
    "OnboardingRequest",
    "OnboardingResult",
    "OrganizationResult",
    "UserResult",
]
