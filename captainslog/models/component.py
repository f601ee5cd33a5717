"""Boat component model - a serviceable subsystem with date and/or hours schedule."""

from __future__ import annotations

import uuid
from datetime import UTC, date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from captainslog.db.session import Base


class BoatComponent(Base):
    """Engine, generator, thruster, battery bank, etc.

    A component is due by date when ``next_service_date`` is set and due by
    hours when both ``next_service_hours`` and ``current_hours`` are set. The
    two axes are independent.
    """

    __tablename__ = "boat_components"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    boat_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("boats.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True)
    type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    position: Mapped[str | None] = mapped_column(String(50), nullable=True)
    brand: Mapped[str | None] = mapped_column(String(255), nullable=True)
    model: Mapped[str | None] = mapped_column(String(255), nullable=True)
    current_hours: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Service schedule
    scheduled_service_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    service_interval_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    service_interval_hours: Mapped[int | None] = mapped_column(Integer, nullable=True)
    last_service_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    last_service_hours: Mapped[int | None] = mapped_column(Integer, nullable=True)
    next_service_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    next_service_hours: Mapped[int | None] = mapped_column(Integer, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(UTC), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    boat: Mapped["Boat"] = relationship("Boat")
