"""Application services (use cases)."""

from tsdb_platform.application.services.notification_endpoint_service import (
    NotificationEndpointService,
)
from tsdb_platform.application.services.onboarding_service import OnboardingService

__all__ = [
    "NotificationEndpointService",
    "OnboardingService",
]
