"""Boat and crew-access models."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from captainslog.db.session import Base

if TYPE_CHECKING:
    from captainslog.models.user import User

# Crew permission levels; "read" crew may view alerts but not change schedules
PERMISSION_READ = "read"
PERMISSION_EDIT = "edit"
PERMISSION_ADMIN = "admin"


class Boat(Base):
    """A boat. Exactly one owner; crew access is granted through BoatCrew."""

    __tablename__ = "boats"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    owner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    make: Mapped[str | None] = mapped_column(String(255), nullable=True)
    model: Mapped[str | None] = mapped_column(String(255), nullable=True)
    home_port: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(UTC), nullable=False
    )

    owner: Mapped[User] = relationship("User")
    crew: Mapped[list[BoatCrew]] = relationship(
        "BoatCrew", back_populates="boat", cascade="all, delete-orphan"
    )


class BoatCrew(Base):
    """Crew grant: a user invited onto someone else's boat."""

    __tablename__ = "boat_users"
    __table_args__ = (UniqueConstraint("boat_id", "user_id", name="uq_boat_users_boat_user"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    boat_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("boats.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    permission_level: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PERMISSION_EDIT
    )
    granted_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(UTC), nullable=False
    )
    revoked_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    boat: Mapped[Boat] = relationship("Boat", back_populates="crew")
