"""Generic key/value row, used for instance-wide flags."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tsdb_platform.infrastructure.persistence.database import Base
from tsdb_platform.infrastructure.persistence.models.mixins import TimestampMixin


class KeyValue(TimestampMixin, Base):
    """Table: kv_store. One row per key."""

    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(String, primary_key=True)
    value: Mapped[str] = mapped_column(String, nullable=False)
