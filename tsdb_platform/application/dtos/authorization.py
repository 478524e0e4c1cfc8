"""DTOs for authorization (token) use cases."""

from dataclasses import dataclass

from tsdb_platform.domain.enums import Status
from tsdb_platform.domain.value_objects import Permission


@dataclass(frozen=True)
class AuthorizationResult:
    """Issued credential. permissions keeps the order it was created with."""

    id: str
    token: str
    user_id: str
    org_id: str
    description: str
    permissions: tuple[Permission, ...]
    status: Status = Status.ACTIVE
