from datetime import datetime

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func
from sqlalchemy.types import DateTime


class Base(DeclarativeBase):
    pass

class TimestampMixin:
    # load server-side timestamps on flush; async sessions cannot lazy-load them later
    __mapper_args__ = {"eager_defaults": True}

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class ModeratedMixin(TimestampMixin):
    """Columns shared by every listing kind that goes through moderation."""

    # "pending" | "active" | "inactive"; only the status engine writes these two
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending", index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)

    # submitting user, when known (users live outside this service)
    owner_user_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
