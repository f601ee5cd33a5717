"""Notification preference reads and upserts."""

from __future__ import annotations

from sqlalchemy.orm import Session

from captainslog.models import NotificationPreferences, User
from captainslog.schemas.notifications import (
    NotificationPreferencesRead,
    NotificationPreferencesUpdate,
)


def get_preferences(db: Session, user: User) -> NotificationPreferencesRead:
    """Stored preferences for the user, or the defaults when none are saved."""
    row = (
        db.query(NotificationPreferences)
        .filter(NotificationPreferences.user_id == user.id)
        .first()
    )
    if row is None:
        return NotificationPreferencesRead()
    return NotificationPreferencesRead.model_validate(row)


def upsert_preferences(
    db: Session, user: User, data: NotificationPreferencesUpdate
) -> NotificationPreferencesRead:
    """Create or replace the user's preferences row."""
    row = (
        db.query(NotificationPreferences)
        .filter(NotificationPreferences.user_id == user.id)
        .first()
    )
    if row is None:
        row = NotificationPreferences(user_id=user.id)
        db.add(row)
    for field, value in data.model_dump().items():
        setattr(row, field, value)
    db.commit()
    db.refresh(row)
    return NotificationPreferencesRead.model_validate(row)
