"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass

from tsdb_platform.domain.enums import Status


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of create_user, get_by_name). No password."""

    id: str
    name: str
    status: Status = Status.ACTIVE
