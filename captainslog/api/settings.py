"""Notification settings API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from captainslog.api.deps import get_db, require_auth
from captainslog.models.user import User
from captainslog.schemas.notifications import (
    NotificationPreferencesUpdate,
    NotificationSettingsResponse,
)
from captainslog.services.notification_settings import get_preferences, upsert_preferences

router = APIRouter()


@router.get("/notifications", response_model=NotificationSettingsResponse)
def api_get_notifications(
    db: Session = Depends(get_db),
    user: User = Depends(require_auth),
) -> NotificationSettingsResponse:
    """Current preferences (defaults when never saved) and the account email."""
    return NotificationSettingsResponse(
        preferences=get_preferences(db, user),
        user_email=user.email,
    )


@router.put("/notifications", response_model=NotificationSettingsResponse)
def api_update_notifications(
    body: NotificationPreferencesUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(require_auth),
) -> NotificationSettingsResponse:
    """Save preferences for the caller."""
    return NotificationSettingsResponse(
        preferences=upsert_preferences(db, user, body),
        user_email=user.email,
    )
