"""DTOs for bucket use cases."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class BucketResult:
    """Bucket read-model. retention_period of zero means data is kept forever."""

    id: str
    org_id: str
    organization: str
    name: str
    retention_period: timedelta
