"""User and credential ORM models."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from tsdb_platform.domain.enums import Status
from tsdb_platform.infrastructure.persistence.database import Base
from tsdb_platform.infrastructure.persistence.models._checks import status_check
from tsdb_platform.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class User(CuidMixin, TimestampMixin, Base):
    """Platform user. Table: app_user. Name is globally unique."""

    __tablename__ = "app_user"

    name: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String, nullable=False, default=Status.ACTIVE.value
    )

    __table_args__ = (status_check("status", Status.values(), "app_user_status_check"),)


class UserPassword(TimestampMixin, Base):
    """Password hash for a user; at most one per user."""

    __tablename__ = "user_password"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), primary_key=True
    )
    hashed_password: Mapped[str] = mapped_column(String, nullable=False)
