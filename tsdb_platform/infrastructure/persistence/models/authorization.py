"""Authorization (API token) ORM model."""

from typing import Any

from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from tsdb_platform.domain.enums import Status
from tsdb_platform.infrastructure.persistence.database import Base
from tsdb_platform.infrastructure.persistence.models._checks import status_check
from tsdb_platform.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Authorization(CuidMixin, TimestampMixin, Base):
    """Bearer token bound to a user and an organization.

    permissions is the ordered list of Permission.to_dict() documents.
    """

    __tablename__ = "authorization_token"

    token: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    org_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("organization.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    description: Mapped[str] = mapped_column(String, nullable=False, default="")
    status: Mapped[str] = mapped_column(
        String, nullable=False, default=Status.ACTIVE.value
    )
    permissions: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False)

    __table_args__ = (
        status_check("status", Status.values(), "authorization_token_status_check"),
    )
