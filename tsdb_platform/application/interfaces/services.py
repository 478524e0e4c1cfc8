"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tsdb_platform.application.dtos.notification_endpoint import (
        FindOptions,
        NotificationEndpointFilter,
    )
    from tsdb_platform.application.dtos.onboarding import OnboardingRequest, OnboardingResult
    from tsdb_platform.domain.entities.notification_endpoint import (
        NotificationEndpoint,
        NotificationEndpointUpdate,
    )


class IOnboardingService(Protocol):
    """First-run setup use case."""

    async def is_onboarding(self) -> bool:
        """Return True while setup has not completed."""

    async def put_onboarding_status(self, value: bool) -> None:
        """Overwrite the onboarding-complete flag."""

    async def generate(self, request: OnboardingRequest) -> OnboardingResult:
        """Create the first user, org, bucket and token; mark setup complete."""


class INotificationEndpointService(Protocol):
    """Create/read/update/delete/list over notification endpoints."""

    async def find_by_id(self, endpoint_id: str) -> NotificationEndpoint:
        """Return endpoint; raise ResourceNotFoundException if absent."""

    async def find(
        self,
        filter: NotificationEndpointFilter,
        options: FindOptions | None = None,
    ) -> tuple[list[NotificationEndpoint], int]:
        """Return one page of matching endpoints and the total match count."""

    async def create(self, endpoint: NotificationEndpoint, user_id: str) -> NotificationEndpoint:
        """Validate, assign ID and timestamps, store secrets separately, persist."""

    async def patch(self, endpoint_id: str, update: NotificationEndpointUpdate) -> NotificationEndpoint:
        """Apply a partial update and return the new state."""

    async def delete(self, endpoint_id: str) -> None:
        """Remove endpoint and its secrets."""
