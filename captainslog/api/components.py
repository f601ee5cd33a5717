"""Component schedule API routes - dismiss, quick-complete, maintenance logs."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from captainslog.api.deps import get_db, get_now, require_auth
from captainslog.models import BoatComponent
from captainslog.models.user import User
from captainslog.schemas.components import (
    DismissAlertRequest,
    DismissAlertResponse,
    LogEntryListResponse,
    LogEntryRead,
    LogEntryResponse,
    MaintenanceLogCreate,
    QuickCompleteRequest,
)
from captainslog.services.boat_access import (
    ScheduleChangeForbiddenError,
    get_component_for_read,
    get_component_for_update,
)
from captainslog.services.maintenance import (
    create_maintenance_log,
    dismiss_alert,
    list_logs,
    quick_complete,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _component_for_update_or_error(
    db: Session, component_id: uuid.UUID, user: User
) -> BoatComponent:
    try:
        component = get_component_for_update(db, component_id, user)
    except ScheduleChangeForbiddenError:
        raise HTTPException(
            status_code=403, detail="Not allowed to change this component"
        ) from None
    if component is None:
        raise HTTPException(status_code=404, detail="Component not found")
    return component


@router.post("/{component_id}/dismiss-alert", response_model=DismissAlertResponse)
def api_dismiss_alert(
    component_id: uuid.UUID,
    body: DismissAlertRequest,
    db: Session = Depends(get_db),
    user: User = Depends(require_auth),
    now: datetime = Depends(get_now),
) -> DismissAlertResponse:
    """Dismiss a maintenance alert by advancing the schedule one interval from today."""
    component = _component_for_update_or_error(db, component_id, user)
    try:
        updates = dismiss_alert(db, component, body.alert_type, now)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to dismiss alert") from None
    return DismissAlertResponse(success=True, updates=updates)


@router.post("/{component_id}/quick-complete", response_model=LogEntryResponse)
def api_quick_complete(
    component_id: uuid.UUID,
    body: QuickCompleteRequest,
    db: Session = Depends(get_db),
    user: User = Depends(require_auth),
    now: datetime = Depends(get_now),
) -> LogEntryResponse:
    """Mark the alert's service as done today and re-project the schedule."""
    component = _component_for_update_or_error(db, component_id, user)
    try:
        entry, updates = quick_complete(
            db,
            component,
            user,
            now,
            alert_type=body.alert_type,
            service_name=body.service_name,
        )
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to complete service") from None
    return LogEntryResponse(log=LogEntryRead.model_validate(entry), updates=updates)


@router.get("/{component_id}/logs", response_model=LogEntryListResponse)
def api_list_logs(
    component_id: uuid.UUID,
    db: Session = Depends(get_db),
    user: User = Depends(require_auth),
) -> LogEntryListResponse:
    """Maintenance history for a component, newest first."""
    component = get_component_for_read(db, component_id, user)
    if component is None:
        raise HTTPException(status_code=404, detail="Component not found")
    return LogEntryListResponse(
        logs=[LogEntryRead.model_validate(e) for e in list_logs(db, component)]
    )


@router.post("/{component_id}/logs", status_code=201, response_model=LogEntryResponse)
def api_create_log(
    component_id: uuid.UUID,
    body: MaintenanceLogCreate,
    db: Session = Depends(get_db),
    user: User = Depends(require_auth),
    now: datetime = Depends(get_now),
) -> LogEntryResponse:
    """Record a performed service; next due date/hours follow from the intervals."""
    component = _component_for_update_or_error(db, component_id, user)
    try:
        entry, updates = create_maintenance_log(db, component, body, user, now)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to create log") from None
    return LogEntryResponse(log=LogEntryRead.model_validate(entry), updates=updates)
