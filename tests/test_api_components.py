"""Component schedule endpoint tests: dismiss, quick-complete, logs."""

from __future__ import annotations

import uuid
from datetime import timedelta
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from tests.factories import TODAY, add_component, auth_headers, grant_crew


def _dismiss(client: TestClient, component_id, user, alert_type: str = "maintenance_date"):
    return client.post(
        f"/api/components/{component_id}/dismiss-alert",
        json={"alertType": alert_type},
        headers=auth_headers(user),
    )


# ── Dismiss ──────────────────────────────────────────────────────


def test_dismiss_date_alert(client_with_db: TestClient, db: Session, owner, boat) -> None:
    comp = add_component(
        db, boat, next_service_date=TODAY - timedelta(days=5), service_interval_days=90
    )

    response = _dismiss(client_with_db, comp.id, owner)

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "updates": {"next_service_date": (TODAY + timedelta(days=90)).isoformat()},
    }
    alerts = client_with_db.get(f"/api/boats/{boat.id}/alerts", headers=auth_headers(owner))
    assert alerts.json()["alerts"] == []


def test_dismiss_hours_alert(client_with_db: TestClient, db: Session, owner, boat) -> None:
    comp = add_component(
        db, boat, current_hours=505, next_service_hours=500, service_interval_hours=100
    )

    response = _dismiss(client_with_db, comp.id, owner, "maintenance_hours")

    assert response.status_code == 200
    assert response.json()["updates"] == {"next_service_hours": 605}


def test_dismiss_without_interval_clears(client_with_db: TestClient, db: Session, owner, boat) -> None:
    comp = add_component(db, boat, next_service_date=TODAY - timedelta(days=5))

    response = _dismiss(client_with_db, comp.id, owner)

    assert response.status_code == 200
    assert response.json()["updates"] == {"next_service_date": None}


def test_dismiss_expiry_type_rejected(client_with_db: TestClient, db: Session, owner, boat) -> None:
    comp = add_component(db, boat)
    assert _dismiss(client_with_db, comp.id, owner, "document_expiry").status_code == 422


def test_dismiss_requires_auth(client_with_db: TestClient, db: Session, boat) -> None:
    comp = add_component(db, boat)
    response = client_with_db.post(
        f"/api/components/{comp.id}/dismiss-alert", json={"alertType": "maintenance_date"}
    )
    assert response.status_code == 401


def test_dismiss_access_rules(
    client_with_db: TestClient, db: Session, crew_user, stranger, boat
) -> None:
    comp = add_component(db, boat, next_service_date=TODAY, service_interval_days=30)

    assert _dismiss(client_with_db, comp.id, stranger).status_code == 404
    assert _dismiss(client_with_db, uuid.uuid4(), stranger).status_code == 404

    grant = grant_crew(db, boat, crew_user, permission_level="read")
    assert _dismiss(client_with_db, comp.id, crew_user).status_code == 403

    grant.permission_level = "edit"
    db.commit()
    assert _dismiss(client_with_db, comp.id, crew_user).status_code == 200


def test_dismiss_write_failure_is_500(client_with_db: TestClient, db: Session, owner, boat) -> None:
    comp = add_component(db, boat, next_service_date=TODAY, service_interval_days=30)
    with patch(
        "captainslog.api.components.dismiss_alert",
        side_effect=OperationalError("UPDATE", {}, Exception("db down")),
    ):
        response = _dismiss(client_with_db, comp.id, owner)
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to dismiss alert"


# ── Quick-complete and logs ──────────────────────────────────────


def test_quick_complete(client_with_db: TestClient, db: Session, owner, boat) -> None:
    comp = add_component(
        db,
        boat,
        scheduled_service_name="Oil change",
        current_hours=250,
        next_service_hours=250,
        service_interval_hours=100,
    )

    response = client_with_db.post(
        f"/api/components/{comp.id}/quick-complete",
        json={"alertType": "maintenance_hours"},
        headers=auth_headers(owner),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["log"]["maintenance_item"] == "Oil change"
    assert body["log"]["date"] == TODAY.isoformat()
    assert body["updates"]["next_service_hours"] == 350


def test_create_and_list_logs(client_with_db: TestClient, db: Session, owner, boat) -> None:
    comp = add_component(db, boat, current_hours=90, service_interval_days=60)

    created = client_with_db.post(
        f"/api/components/{comp.id}/logs",
        json={
            "maintenance_item": "Impeller replacement",
            "date": "2024-03-01",
            "cost": "120.50",
            "hours_at_service": 95,
        },
        headers=auth_headers(owner),
    )
    listed = client_with_db.get(f"/api/components/{comp.id}/logs", headers=auth_headers(owner))

    assert created.status_code == 201
    assert created.json()["updates"]["next_service_date"] == "2024-04-30"
    assert created.json()["updates"]["current_hours"] == 95
    assert listed.status_code == 200
    assert [log["maintenance_item"] for log in listed.json()["logs"]] == ["Impeller replacement"]


def test_create_log_validation(client_with_db: TestClient, db: Session, owner, boat) -> None:
    comp = add_component(db, boat)
    response = client_with_db.post(
        f"/api/components/{comp.id}/logs",
        json={"maintenance_item": "", "hours_at_service": -1},
        headers=auth_headers(owner),
    )
    assert response.status_code == 422


def test_read_crew_can_list_but_not_log(
    client_with_db: TestClient, db: Session, crew_user, boat
) -> None:
    grant_crew(db, boat, crew_user, permission_level="read")
    comp = add_component(db, boat)

    listed = client_with_db.get(f"/api/components/{comp.id}/logs", headers=auth_headers(crew_user))
    created = client_with_db.post(
        f"/api/components/{comp.id}/logs",
        json={"maintenance_item": "Service"},
        headers=auth_headers(crew_user),
    )

    assert listed.status_code == 200
    assert created.status_code == 403
