"""Pydantic schemas for request/response validation."""

from captainslog.schemas.alerts import Alert, AlertListResponse, AlertType, Severity
from captainslog.schemas.auth import LoginRequest, TokenResponse, UserRead
from captainslog.schemas.components import (
    DismissAlertRequest,
    DismissAlertResponse,
    LogEntryListResponse,
    LogEntryRead,
    LogEntryResponse,
    MaintenanceLogCreate,
    QuickCompleteRequest,
)
from captainslog.schemas.notifications import (
    DigestRunResponse,
    DigestUserResult,
    NotificationPreferencesRead,
    NotificationPreferencesUpdate,
    NotificationSettingsResponse,
)

__all__ = [
    # Alerts
    "Alert",
    "AlertListResponse",
    "AlertType",
    "Severity",
    # Auth
    "LoginRequest",
    "TokenResponse",
    "UserRead",
    # Components
    "DismissAlertRequest",
    "DismissAlertResponse",
    "LogEntryListResponse",
    "LogEntryRead",
    "LogEntryResponse",
    "MaintenanceLogCreate",
    "QuickCompleteRequest",
    # Notifications
    "DigestRunResponse",
    "DigestUserResult",
    "NotificationPreferencesRead",
    "NotificationPreferencesUpdate",
    "NotificationSettingsResponse",
]
