"""Organization ORM model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tsdb_platform.infrastructure.persistence.database import Base
from tsdb_platform.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Organization(CuidMixin, TimestampMixin, Base):
    """Tenant container. Table: organization. Name is globally unique."""

    __tablename__ = "organization"

    name: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
