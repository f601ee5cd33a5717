"""Alert generation - scans a boat's records and derives due alerts.

Three record collections feed the scan:

* components: one date alert (``next_service_date``) and one hours alert
  (``next_service_hours`` vs ``current_hours``), independently;
* documents with an ``expiry_date``, filtered by their own ``reminder_days``;
* safety equipment: expiry and service date, independently.

The scan functions are pure over already-loaded records so the digest job can
reuse them with a different ScanWindow. ``generate_alerts`` is the per-boat
entry point; it assumes the caller already checked access to the boat.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime

from sqlalchemy.orm import Session

from captainslog.config import get_settings
from captainslog.models import Boat, BoatComponent, Document, SafetyEquipment
from captainslog.schemas.alerts import Alert, AlertType
from captainslog.services.alerts.schedule import days_between, scan_date
from captainslog.services.alerts.severity import (
    DEFAULT_THRESHOLDS,
    UPCOMING_DAYS,
    UPCOMING_HOURS,
    SeverityThresholds,
    classify_hours_severity,
    classify_severity,
)

logger = logging.getLogger(__name__)

DOCUMENT_REMINDER_DAYS: int = 30

SAFETY_TYPE_LABELS: dict[str, str] = {
    "fire_extinguisher": "Fire Extinguishers",
    "engine_room_fire_system": "Engine Room Fire System",
    "life_jacket": "Life Jackets",
    "life_raft": "Life Raft",
    "flares": "Flares",
    "epirb": "EPIRB",
    "first_aid_kit": "First Aid Kit",
    "life_ring": "Life Ring",
    "fire_blanket": "Fire Blanket",
    "other": "Safety Equipment",
}


@dataclass(frozen=True)
class ScanWindow:
    """Inclusion bounds for a scan.

    ``min_days`` None keeps overdue items. ``document_reminder_days`` None
    makes documents use ``max_days`` instead of their own reminder window.
    """

    max_days: int = UPCOMING_DAYS
    max_hours: int = UPCOMING_HOURS
    min_days: int | None = None
    document_reminder_days: int | None = DOCUMENT_REMINDER_DAYS

    @classmethod
    def from_settings(cls, settings) -> ScanWindow:
        return cls(
            max_days=settings.alert_lookahead_days,
            max_hours=settings.alert_hours_lookahead,
            document_reminder_days=settings.document_reminder_days,
        )

    def includes_days(self, days: int, max_days: int | None = None) -> bool:
        if self.min_days is not None and days < self.min_days:
            return False
        return days <= (self.max_days if max_days is None else max_days)


DEFAULT_WINDOW = ScanWindow()


def safety_item_name(item) -> str:
    """Display name: fixed label per type; ``other`` uses the free-text name."""
    if item.type == "other":
        return item.type_other or SAFETY_TYPE_LABELS["other"]
    return SAFETY_TYPE_LABELS.get(item.type, item.type)


def scan_component_dates(
    components: Iterable,
    boat,
    today: date,
    window: ScanWindow = DEFAULT_WINDOW,
    thresholds: SeverityThresholds = DEFAULT_THRESHOLDS,
) -> list[Alert]:
    alerts: list[Alert] = []
    for comp in components:
        if comp.next_service_date is None:
            continue
        days = days_between(today, comp.next_service_date)
        if not window.includes_days(days):
            continue
        alerts.append(
            Alert(
                id=f"comp-date-{comp.id}",
                type=AlertType.MAINTENANCE_DATE,
                severity=classify_severity(days, thresholds),
                title=f"{comp.name} service due",
                description="Scheduled maintenance",
                due_date=comp.next_service_date,
                component_id=comp.id,
                component_name=comp.name,
                boat_id=boat.id,
                boat_name=boat.name,
            )
        )
    return alerts


def scan_component_hours(
    components: Iterable,
    boat,
    window: ScanWindow = DEFAULT_WINDOW,
    thresholds: SeverityThresholds = DEFAULT_THRESHOLDS,
) -> list[Alert]:
    alerts: list[Alert] = []
    for comp in components:
        if comp.next_service_hours is None or comp.current_hours is None:
            continue
        remaining = comp.next_service_hours - comp.current_hours
        if remaining > window.max_hours:
            continue
        alerts.append(
            Alert(
                id=f"comp-hours-{comp.id}",
                type=AlertType.MAINTENANCE_HOURS,
                severity=classify_hours_severity(remaining, thresholds),
                title=f"{comp.name} service due",
                description="Based on running hours",
                due_hours=comp.next_service_hours,
                current_hours=comp.current_hours,
                component_id=comp.id,
                component_name=comp.name,
                boat_id=boat.id,
                boat_name=boat.name,
            )
        )
    return alerts


def scan_documents(
    documents: Iterable,
    boat,
    today: date,
    window: ScanWindow = DEFAULT_WINDOW,
    thresholds: SeverityThresholds = DEFAULT_THRESHOLDS,
) -> list[Alert]:
    alerts: list[Alert] = []
    for doc in documents:
        if doc.expiry_date is None:
            continue
        days = days_between(today, doc.expiry_date)
        reminder = None
        if window.document_reminder_days is not None:
            reminder = doc.reminder_days or window.document_reminder_days
        if not window.includes_days(days, reminder):
            continue
        category = doc.category or "other"
        alerts.append(
            Alert(
                id=f"doc-{doc.id}",
                type=AlertType.DOCUMENT_EXPIRY,
                severity=classify_severity(days, thresholds),
                title=f"{doc.name} expires",
                description=category[:1].upper() + category[1:],
                due_date=doc.expiry_date,
                document_id=doc.id,
                boat_id=boat.id,
                boat_name=boat.name,
            )
        )
    return alerts


def scan_safety_equipment(
    items: Iterable,
    boat,
    today: date,
    window: ScanWindow = DEFAULT_WINDOW,
    thresholds: SeverityThresholds = DEFAULT_THRESHOLDS,
) -> list[Alert]:
    alerts: list[Alert] = []
    for item in items:
        name = safety_item_name(item)

        if item.expiry_date is not None:
            days = days_between(today, item.expiry_date)
            if window.includes_days(days):
                # Expiry is type-unified with documents: a dated item lapses
                alerts.append(
                    Alert(
                        id=f"safety-exp-{item.id}",
                        type=AlertType.DOCUMENT_EXPIRY,
                        severity=classify_severity(days, thresholds),
                        title=f"{name} expires",
                        description="Safety equipment",
                        due_date=item.expiry_date,
                        boat_id=boat.id,
                        boat_name=boat.name,
                    )
                )

        if item.next_service_date is not None:
            days = days_between(today, item.next_service_date)
            if window.includes_days(days):
                alerts.append(
                    Alert(
                        id=f"safety-svc-{item.id}",
                        type=AlertType.MAINTENANCE_DATE,
                        severity=classify_severity(days, thresholds),
                        title=f"{name} service due",
                        description="Safety equipment inspection",
                        due_date=item.next_service_date,
                        boat_id=boat.id,
                        boat_name=boat.name,
                    )
                )
    return alerts


# ── Storage reads ──────────────────────────────────────────────────────


def load_components(db: Session, boat_ids: Sequence[uuid.UUID]) -> list[BoatComponent]:
    return db.query(BoatComponent).filter(BoatComponent.boat_id.in_(boat_ids)).all()


def load_expiring_documents(db: Session, boat_ids: Sequence[uuid.UUID]) -> list[Document]:
    return (
        db.query(Document)
        .filter(Document.boat_id.in_(boat_ids), Document.expiry_date.is_not(None))
        .all()
    )


def load_safety_equipment(db: Session, boat_ids: Sequence[uuid.UUID]) -> list[SafetyEquipment]:
    return db.query(SafetyEquipment).filter(SafetyEquipment.boat_id.in_(boat_ids)).all()


def generate_alerts(
    db: Session,
    boat: Boat,
    now: datetime | date,
    *,
    settings=None,
) -> list[Alert]:
    """Derive all current alerts for one boat (unordered).

    Args:
        db: Database session.
        boat: Access-checked boat.
        now: Request clock; reduced to a calendar date before any arithmetic.
        settings: Optional settings override (thresholds, timezone).

    Returns:
        Alerts for components, documents and safety equipment. Storage
        errors propagate.
    """
    return generate_alerts_for_boats(db, [boat], now, settings=settings)


def generate_alerts_for_boats(
    db: Session,
    boats: Sequence[Boat],
    now: datetime | date,
    *,
    settings=None,
) -> list[Alert]:
    """Same as generate_alerts across several boats, with one read per collection."""
    if not boats:
        return []
    if settings is None:
        settings = get_settings()
    today = scan_date(now, settings.alert_timezone)
    window = ScanWindow.from_settings(settings)
    thresholds = SeverityThresholds.from_settings(settings)

    boat_ids = [b.id for b in boats]
    components = _group_by_boat(load_components(db, boat_ids))
    documents = _group_by_boat(load_expiring_documents(db, boat_ids))
    equipment = _group_by_boat(load_safety_equipment(db, boat_ids))

    alerts: list[Alert] = []
    for boat in boats:
        comps = components.get(boat.id, [])
        alerts.extend(scan_component_dates(comps, boat, today, window, thresholds))
        alerts.extend(scan_component_hours(comps, boat, window, thresholds))
        alerts.extend(scan_documents(documents.get(boat.id, []), boat, today, window, thresholds))
        alerts.extend(
            scan_safety_equipment(equipment.get(boat.id, []), boat, today, window, thresholds)
        )

    logger.debug("alerts_generated: boats=%d today=%s alerts=%d", len(boats), today, len(alerts))
    return alerts


def _group_by_boat(rows: Iterable) -> dict[uuid.UUID, list]:
    grouped: dict[uuid.UUID, list] = {}
    for row in rows:
        grouped.setdefault(row.boat_id, []).append(row)
    return grouped
