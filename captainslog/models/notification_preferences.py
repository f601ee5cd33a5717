"""Per-user email notification preferences."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from captainslog.db.session import Base

DIGEST_MODES = ("immediate", "daily", "weekly")


class NotificationPreferences(Base):
    """One row per user; absent row means defaults (email disabled)."""

    __tablename__ = "notification_preferences"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    email_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    email_address: Mapped[str | None] = mapped_column(String(320), nullable=True)
    notify_document_expiry: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notify_maintenance_due: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notify_hours_threshold: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    advance_notice_days: Mapped[int] = mapped_column(Integer, nullable=False, default=14)
    digest_mode: Mapped[str] = mapped_column(String(20), nullable=False, default="immediate")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    user: Mapped["User"] = relationship("User")
