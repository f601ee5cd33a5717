"""Maintenance schedule writes: alert dismissal and service completion.

These are the only code paths that move a component's due point. Both use
the shared projection in ``services.alerts.schedule``:

* dismiss advances one interval from *today*;
* a maintenance log (and quick-complete, which creates one) advances one
  interval from the service date / hours at service.

A missing interval clears the corresponding next-due field rather than
leaving a stale or invalid value.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from captainslog.config import get_settings
from captainslog.models import BoatComponent, LogEntry, User
from captainslog.schemas.components import MaintenanceLogCreate
from captainslog.services.alerts.schedule import advance_date, advance_hours, scan_date

logger = logging.getLogger(__name__)

ALERT_TYPE_DATE = "maintenance_date"
ALERT_TYPE_HOURS = "maintenance_hours"
QUICK_COMPLETE_DESCRIPTION = "Quick completed from alerts"


def _apply(db: Session, component: BoatComponent, updates: dict) -> None:
    """Write updates to the component row and commit; roll back on failure."""
    for field, value in updates.items():
        setattr(component, field, value)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("component_update_failed: component_id=%s", component.id)
        raise
    db.refresh(component)


def dismiss_alert(
    db: Session,
    component: BoatComponent,
    alert_type: str,
    now: datetime | date,
    *,
    settings=None,
) -> dict:
    """Push the component's next due point one interval forward from today.

    Without a configured interval (or, for hours, without current hours) the
    next-due field is cleared: the alert stops firing and nothing is re-armed.

    Returns:
        The field updates that were written.
    """
    if settings is None:
        settings = get_settings()
    today = scan_date(now, settings.alert_timezone)

    if alert_type == ALERT_TYPE_DATE:
        updates = {
            "next_service_date": advance_date(today, component.service_interval_days),
        }
    elif alert_type == ALERT_TYPE_HOURS:
        updates = {
            "next_service_hours": advance_hours(
                component.current_hours, component.service_interval_hours
            ),
        }
    else:
        raise ValueError(f"Alert type {alert_type!r} has no server-side schedule")

    _apply(db, component, updates)
    logger.info(
        "alert_dismissed: component_id=%s alert_type=%s updates=%s",
        component.id,
        alert_type,
        updates,
    )
    return updates


def project_service(
    component: BoatComponent,
    service_date: date,
    hours_at_service: int | None,
) -> dict:
    """Compute component updates for a service performed on ``service_date``.

    Pure: reads the component, returns the new field values.
    """
    updates: dict = {"last_service_date": service_date}

    if hours_at_service is not None:
        updates["last_service_hours"] = hours_at_service
        if hours_at_service > (component.current_hours or 0):
            updates["current_hours"] = hours_at_service

    updates["next_service_date"] = advance_date(service_date, component.service_interval_days)

    base_hours = (
        hours_at_service if hours_at_service is not None else (component.current_hours or 0)
    )
    updates["next_service_hours"] = advance_hours(base_hours, component.service_interval_hours)
    return updates


def create_maintenance_log(
    db: Session,
    component: BoatComponent,
    data: MaintenanceLogCreate,
    user: User,
    now: datetime | date,
    *,
    settings=None,
) -> tuple[LogEntry, dict]:
    """Record a performed service and re-project the component schedule.

    The log row and the schedule update are committed together.
    """
    if settings is None:
        settings = get_settings()
    service_date = data.date or scan_date(now, settings.alert_timezone)

    entry = LogEntry(
        boat_id=component.boat_id,
        component_id=component.id,
        maintenance_item=data.maintenance_item,
        date=service_date,
        description=data.description or "",
        cost=data.cost,
        currency=data.currency,
        hours_at_service=data.hours_at_service,
        notes=data.notes,
        created_by=user.id,
    )
    db.add(entry)

    updates = project_service(component, service_date, data.hours_at_service)
    _apply(db, component, updates)
    db.refresh(entry)

    logger.info(
        "maintenance_logged: component_id=%s log_id=%s next_date=%s next_hours=%s",
        component.id,
        entry.id,
        updates.get("next_service_date"),
        updates.get("next_service_hours"),
    )
    return entry, updates


def quick_complete(
    db: Session,
    component: BoatComponent,
    user: User,
    now: datetime | date,
    *,
    alert_type: str | None = None,
    service_name: str | None = None,
    settings=None,
) -> tuple[LogEntry, dict]:
    """Complete an alert from its row: log a service today at current hours."""
    data = MaintenanceLogCreate(
        maintenance_item=component.scheduled_service_name or service_name or "Service",
        description=QUICK_COMPLETE_DESCRIPTION,
        hours_at_service=component.current_hours,
    )
    logger.info("quick_complete: component_id=%s alert_type=%s", component.id, alert_type)
    return create_maintenance_log(db, component, data, user, now, settings=settings)


def list_logs(db: Session, component: BoatComponent) -> list[LogEntry]:
    """Maintenance history for a component, newest first."""
    return (
        db.query(LogEntry)
        .filter(LogEntry.component_id == component.id)
        .order_by(LogEntry.date.desc(), LogEntry.created_at.desc())
        .all()
    )
