"""Alert schemas - computed, never persisted."""

from __future__ import annotations

import uuid
from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Severity(str, Enum):
    """Ordinal urgency tier, most urgent first."""

    OVERDUE = "overdue"
    URGENT = "urgent"
    UPCOMING = "upcoming"
    INFO = "info"


class AlertType(str, Enum):
    MAINTENANCE_DATE = "maintenance_date"
    MAINTENANCE_HOURS = "maintenance_hours"
    DOCUMENT_EXPIRY = "document_expiry"
    HEALTH_CHECK = "health_check"


class Alert(BaseModel):
    """A due maintenance item, expiring document or safety-equipment event.

    Reconstructible from the source record plus the scan date; ``id`` is
    derived from the record id and alert kind so clients can dedupe.
    Serialized with camelCase keys (``dueDate``, ``componentId``...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    type: AlertType
    severity: Severity
    title: str
    description: str
    due_date: date | None = None
    due_hours: int | None = None
    current_hours: int | None = None
    component_id: uuid.UUID | None = None
    component_name: str | None = None
    document_id: uuid.UUID | None = None
    boat_id: uuid.UUID
    boat_name: str | None = None


class AlertListResponse(BaseModel):
    alerts: list[Alert]
