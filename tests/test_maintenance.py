"""Dismissal and service-completion tests: schedule projection and write-back."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from captainslog.models import LogEntry
from captainslog.schemas.components import MaintenanceLogCreate
from captainslog.services.alerts.generator import generate_alerts
from captainslog.services.maintenance import (
    QUICK_COMPLETE_DESCRIPTION,
    create_maintenance_log,
    dismiss_alert,
    list_logs,
    project_service,
    quick_complete,
)
from tests.factories import NOW, TODAY, add_component


# ── Dismiss ──────────────────────────────────────────────────────


class TestDismissDate:
    def test_advances_from_today_not_old_due_date(self, db: Session, boat) -> None:
        comp = add_component(
            db, boat, next_service_date=TODAY - timedelta(days=10), service_interval_days=90
        )
        updates = dismiss_alert(db, comp, "maintenance_date", NOW)
        assert updates == {"next_service_date": TODAY + timedelta(days=90)}
        db.refresh(comp)
        assert comp.next_service_date == TODAY + timedelta(days=90)

    def test_dismissed_alert_leaves_lookahead(self, db: Session, boat) -> None:
        comp = add_component(
            db, boat, next_service_date=TODAY - timedelta(days=10), service_interval_days=90
        )
        assert [a.id for a in generate_alerts(db, boat, NOW)] == [f"comp-date-{comp.id}"]
        dismiss_alert(db, comp, "maintenance_date", NOW)
        assert generate_alerts(db, boat, NOW) == []

    def test_without_interval_clears_due_date(self, db: Session, boat) -> None:
        comp = add_component(db, boat, next_service_date=TODAY - timedelta(days=3))
        updates = dismiss_alert(db, comp, "maintenance_date", NOW)
        assert updates == {"next_service_date": None}
        db.refresh(comp)
        assert comp.next_service_date is None
        assert generate_alerts(db, boat, NOW) == []

    def test_repeat_dismiss_same_day_is_idempotent(self, db: Session, boat) -> None:
        comp = add_component(db, boat, next_service_date=TODAY, service_interval_days=30)
        first = dismiss_alert(db, comp, "maintenance_date", NOW)
        second = dismiss_alert(db, comp, "maintenance_date", NOW)
        assert first == second


class TestDismissHours:
    def test_advances_from_current_hours(self, db: Session, boat) -> None:
        comp = add_component(
            db, boat, current_hours=510, next_service_hours=500, service_interval_hours=250
        )
        updates = dismiss_alert(db, comp, "maintenance_hours", NOW)
        assert updates == {"next_service_hours": 760}
        db.refresh(comp)
        assert comp.next_service_hours == 760

    def test_without_interval_clears_due_hours(self, db: Session, boat) -> None:
        comp = add_component(db, boat, current_hours=510, next_service_hours=500)
        assert dismiss_alert(db, comp, "maintenance_hours", NOW) == {"next_service_hours": None}

    def test_leaves_date_axis_alone(self, db: Session, boat) -> None:
        due = TODAY + timedelta(days=2)
        comp = add_component(
            db,
            boat,
            current_hours=100,
            next_service_hours=105,
            service_interval_hours=100,
            next_service_date=due,
        )
        dismiss_alert(db, comp, "maintenance_hours", NOW)
        db.refresh(comp)
        assert comp.next_service_date == due


def test_dismiss_rejects_expiry_alerts(db: Session, boat) -> None:
    comp = add_component(db, boat)
    with pytest.raises(ValueError):
        dismiss_alert(db, comp, "document_expiry", NOW)


def test_dismiss_rolls_back_and_reraises_on_write_failure() -> None:
    db = MagicMock()
    db.commit.side_effect = OperationalError("UPDATE", {}, Exception("db down"))
    comp = MagicMock(service_interval_days=30)
    with pytest.raises(OperationalError):
        dismiss_alert(db, comp, "maintenance_date", NOW)
    db.rollback.assert_called_once()
    db.refresh.assert_not_called()


# ── Service projection ───────────────────────────────────────────


class TestProjectService:
    def test_projects_from_service_date_and_hours(self) -> None:
        comp = MagicMock(current_hours=400, service_interval_days=365, service_interval_hours=250)
        updates = project_service(comp, date(2024, 1, 15), 420)
        assert updates == {
            "last_service_date": date(2024, 1, 15),
            "last_service_hours": 420,
            "current_hours": 420,
            "next_service_date": date(2025, 1, 14),
            "next_service_hours": 670,
        }

    def test_missing_intervals_clear_next_due(self) -> None:
        comp = MagicMock(current_hours=400, service_interval_days=None, service_interval_hours=None)
        updates = project_service(comp, TODAY, None)
        assert updates["next_service_date"] is None
        assert updates["next_service_hours"] is None

    def test_lower_reading_does_not_rewind_current_hours(self) -> None:
        comp = MagicMock(current_hours=400, service_interval_days=None, service_interval_hours=100)
        updates = project_service(comp, TODAY, 380)
        assert "current_hours" not in updates
        assert updates["next_service_hours"] == 480

    def test_hours_projection_falls_back_to_current_hours(self) -> None:
        comp = MagicMock(current_hours=400, service_interval_days=None, service_interval_hours=100)
        assert project_service(comp, TODAY, None)["next_service_hours"] == 500


# ── Log flow and quick-complete ──────────────────────────────────


def test_create_maintenance_log_writes_entry_and_schedule(db: Session, boat, owner) -> None:
    comp = add_component(
        db,
        boat,
        current_hours=300,
        service_interval_days=180,
        service_interval_hours=200,
        next_service_date=TODAY - timedelta(days=4),
    )
    data = MaintenanceLogCreate(
        maintenance_item="Oil change",
        date=date(2024, 3, 1),
        cost=Decimal("450.00"),
        hours_at_service=310,
    )
    entry, updates = create_maintenance_log(db, comp, data, owner, NOW)

    assert entry.id is not None
    assert entry.boat_id == boat.id
    assert entry.component_id == comp.id
    assert entry.created_by == owner.id
    assert entry.currency == "AED"
    db.refresh(comp)
    assert comp.last_service_date == date(2024, 3, 1)
    assert comp.next_service_date == date(2024, 8, 28)
    assert comp.next_service_hours == 510
    assert comp.current_hours == 310
    assert updates["next_service_date"] == date(2024, 8, 28)


def test_create_maintenance_log_defaults_to_today(db: Session, boat, owner) -> None:
    comp = add_component(db, boat, service_interval_days=30)
    entry, updates = create_maintenance_log(
        db, comp, MaintenanceLogCreate(maintenance_item="Impeller"), owner, NOW
    )
    assert entry.date == TODAY
    assert updates["next_service_date"] == TODAY + timedelta(days=30)


def test_quick_complete_logs_service_today(db: Session, boat, owner) -> None:
    comp = add_component(
        db,
        boat,
        scheduled_service_name="Annual service",
        current_hours=820,
        service_interval_days=365,
        service_interval_hours=250,
        next_service_date=TODAY - timedelta(days=1),
        next_service_hours=800,
    )
    entry, updates = quick_complete(db, comp, owner, NOW, alert_type="maintenance_hours")

    assert entry.maintenance_item == "Annual service"
    assert entry.description == QUICK_COMPLETE_DESCRIPTION
    assert entry.date == TODAY
    assert entry.hours_at_service == 820
    assert updates["next_service_date"] == TODAY + timedelta(days=365)
    assert updates["next_service_hours"] == 1070
    assert generate_alerts(db, boat, NOW) == []


def test_quick_complete_without_interval_clears_schedule(db: Session, boat, owner) -> None:
    comp = add_component(db, boat, next_service_date=TODAY)
    _, updates = quick_complete(db, comp, owner, NOW, service_name="Hull clean")
    assert updates["next_service_date"] is None
    assert db.query(LogEntry).one().maintenance_item == "Hull clean"


def test_list_logs_newest_first(db: Session, boat, owner) -> None:
    comp = add_component(db, boat)
    for day in (date(2024, 1, 1), date(2024, 3, 1), date(2024, 2, 1)):
        create_maintenance_log(
            db, comp, MaintenanceLogCreate(maintenance_item="Service", date=day), owner, NOW
        )
    assert [e.date for e in list_logs(db, comp)] == [
        date(2024, 3, 1),
        date(2024, 2, 1),
        date(2024, 1, 1),
    ]
