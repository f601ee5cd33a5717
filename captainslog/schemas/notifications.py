"""Notification preference and digest schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DigestMode = Literal["immediate", "daily", "weekly"]


class NotificationPreferencesRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    email_enabled: bool = False
    email_address: str | None = None
    notify_document_expiry: bool = True
    notify_maintenance_due: bool = True
    notify_hours_threshold: bool = True
    advance_notice_days: int = 14
    digest_mode: DigestMode = "immediate"


class NotificationPreferencesUpdate(BaseModel):
    """PUT body. Channel flags default on; unknown digest modes fall back."""

    email_enabled: bool = False
    email_address: str | None = Field(None, max_length=320)
    notify_document_expiry: bool = True
    notify_maintenance_due: bool = True
    notify_hours_threshold: bool = True
    advance_notice_days: int = Field(14, ge=1, le=365)
    digest_mode: str = "immediate"

    @field_validator("email_address")
    @classmethod
    def _blank_to_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("digest_mode")
    @classmethod
    def _known_mode(cls, v: str) -> str:
        return v if v in ("immediate", "daily", "weekly") else "immediate"


class NotificationSettingsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    preferences: NotificationPreferencesRead
    user_email: str = Field("", alias="userEmail")


class DigestUserResult(BaseModel):
    """Per-user outcome of one digest run."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(..., alias="userId")
    sent: bool
    alert_count: int = Field(..., alias="alertCount")
    error: str | None = None


class DigestRunResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    sent: int
    total_alerts: int = Field(..., alias="totalAlerts")
    results: list[DigestUserResult] = []
