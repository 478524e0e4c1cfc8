"""Bucket ORM model."""

from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tsdb_platform.infrastructure.persistence.database import Base
from tsdb_platform.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Bucket(CuidMixin, TimestampMixin, Base):
    """Named time-series container. Unique (org_id, name); retention 0 = forever."""

    __tablename__ = "bucket"

    org_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("organization.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    retention_seconds: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("org_id", "name", name="uq_bucket_org_name"),
        CheckConstraint("retention_seconds >= 0", name="bucket_retention_check"),
    )
