"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain types only; no infrastructure imports.
Implementations raise domain exceptions (e.g. UserAlreadyExistsException);
callers do not translate them.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tsdb_platform.application.dtos.authorization import AuthorizationResult
    from tsdb_platform.application.dtos.bucket import BucketResult
    from tsdb_platform.application.dtos.organization import OrganizationResult
    from tsdb_platform.application.dtos.user import UserResult
    from tsdb_platform.domain.entities.notification_endpoint import NotificationEndpoint
    from tsdb_platform.domain.value_objects import Permission


class IOnboardingStatusStore(Protocol):
    """Durable flag recording whether first-run setup has completed."""

    async def is_onboarding_complete(self) -> bool:
        """Return the stored flag; False when nothing has been stored."""

    async def set_onboarding_complete(self, value: bool) -> None:
        """Overwrite the stored flag."""


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def create_user(self, name: str) -> UserResult:
        """Create a user; raise UserAlreadyExistsException if name is taken."""

    async def get_by_name(self, name: str) -> UserResult | None:
        """Return user by unique name."""


class IPasswordStore(Protocol):
    """Attaches credentials to existing users."""

    async def set_password(self, name: str, password: str) -> None:
        """Hash and store password for the named user; raise ResourceNotFoundException if absent."""


class IOrganizationRepository(Protocol):
    """Protocol for organization repository (DIP)."""

    async def create_organization(self, name: str) -> OrganizationResult:
        """Create an organization; raise OrganizationAlreadyExistsException if name is taken."""

    async def get_by_id(self, org_id: str) -> OrganizationResult | None:
        """Return organization by ID."""

    async def get_by_name(self, name: str) -> OrganizationResult | None:
        """Return organization by unique name."""


class IBucketRepository(Protocol):
    """Protocol for bucket repository (DIP)."""

    async def create_bucket(
        self,
        org_id: str,
        organization: str,
        name: str,
        retention_period: timedelta,
    ) -> BucketResult:
        """Create a bucket in org_id; raise ResourceNotFoundException if the org does not exist."""


class IAuthorizationRepository(Protocol):
    """Protocol for authorization (token) repository (DIP)."""

    async def create_authorization(
        self,
        user_id: str,
        org_id: str,
        permissions: Sequence[Permission],
        description: str,
    ) -> AuthorizationResult:
        """Issue a token bound to user and org with exactly the given permissions, in order."""


class INotificationEndpointRepository(Protocol):
    """Storage for notification endpoint documents."""

    async def get(self, endpoint_id: str) -> NotificationEndpoint | None:
        """Return endpoint by ID."""

    async def list_all(self) -> list[NotificationEndpoint]:
        """Return every stored endpoint (unordered)."""

    async def put(self, endpoint: NotificationEndpoint) -> None:
        """Insert or replace endpoint by its ID."""

    async def delete(self, endpoint_id: str) -> None:
        """Remove endpoint; raise ResourceNotFoundException if absent."""


class ISecretStore(Protocol):
    """Per-organization secret values (notification endpoint credentials)."""

    async def put_secret(self, org_id: str, key: str, value: str) -> None:
        """Store value under key for org_id."""

    async def get_secret(self, org_id: str, key: str) -> str | None:
        """Return stored value or None."""

    async def delete_secret(self, org_id: str, key: str) -> None:
        """Remove key; no-op if absent."""
