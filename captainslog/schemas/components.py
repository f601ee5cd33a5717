"""Component schedule and maintenance log schemas."""

from __future__ import annotations

import uuid
from datetime import date as date_type
from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Only maintenance alerts carry a server-side schedule; expiry alerts are
# hidden client-side and never reach the dismiss endpoint.
DismissibleAlertType = Literal["maintenance_date", "maintenance_hours"]


class DismissAlertRequest(BaseModel):
    """Body for POST /api/components/{id}/dismiss-alert."""

    model_config = ConfigDict(populate_by_name=True)

    alert_type: DismissibleAlertType = Field(..., alias="alertType")


class DismissAlertResponse(BaseModel):
    success: bool = True
    updates: dict


class QuickCompleteRequest(BaseModel):
    """Body for POST /api/components/{id}/quick-complete (alert row "check")."""

    model_config = ConfigDict(populate_by_name=True)

    alert_type: DismissibleAlertType | None = Field(None, alias="alertType")
    service_name: str | None = Field(None, alias="serviceName", max_length=255)


class MaintenanceLogCreate(BaseModel):
    """Schema for recording a performed service."""

    maintenance_item: str = Field(..., min_length=1, max_length=255)
    date: date_type | None = None
    description: str = ""
    cost: Decimal | None = Field(None, ge=0)
    currency: str = Field("AED", min_length=3, max_length=3)
    hours_at_service: int | None = Field(None, ge=0)
    notes: str | None = None


class LogEntryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    boat_id: uuid.UUID
    component_id: uuid.UUID | None
    maintenance_item: str
    date: date_type
    description: str
    cost: Decimal | None
    currency: str
    hours_at_service: int | None
    notes: str | None
    created_by: int | None
    created_at: datetime


class LogEntryResponse(BaseModel):
    log: LogEntryRead
    updates: dict


class LogEntryListResponse(BaseModel):
    logs: list[LogEntryRead]
