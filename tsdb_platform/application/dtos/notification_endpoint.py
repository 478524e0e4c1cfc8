"""DTOs for notification endpoint queries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationEndpointFilter:
    """Restricts which endpoints a find returns. All set fields must match."""

    id: str | None = None
    org_id: str | None = None
    organization: str | None = None

    def query_params(self) -> dict[str, list[str]]:
        """Return the filter as URL query parameters (orgID, org)."""
        params: dict[str, list[str]] = {}
        if self.org_id is not None:
            params["orgID"] = [self.org_id]
        if self.organization is not None:
            params["org"] = [self.organization]
        return params


@dataclass(frozen=True)
class FindOptions:
    """Pagination and sorting for list queries. limit of 0 means no limit."""

    limit: int = 0
    offset: int = 0
    sort_by: str = "name"
    descending: bool = False
