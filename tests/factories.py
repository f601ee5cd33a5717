"""Row builders and request helpers shared by the test modules."""

from __future__ import annotations

from datetime import date, datetime, timezone

from sqlalchemy.orm import Session

# Pinned request clock for API tests: Friday 2024-03-08 10:00 UTC
TODAY = date(2024, 3, 8)
NOW = datetime(2024, 3, 8, 10, 0, tzinfo=timezone.utc)


def grant_crew(db: Session, boat, user, permission_level: str = "edit"):
    from captainslog.models import BoatCrew

    grant = BoatCrew(boat_id=boat.id, user_id=user.id, permission_level=permission_level)
    db.add(grant)
    db.commit()
    return grant


def add_boat(db: Session, owner, name: str = "Second Wind"):
    from captainslog.models import Boat

    b = Boat(owner_id=owner.id, name=name)
    db.add(b)
    db.commit()
    db.refresh(b)
    return b


def add_component(db: Session, boat, **fields):
    from captainslog.models import BoatComponent

    fields.setdefault("name", "Port Engine")
    comp = BoatComponent(boat_id=boat.id, **fields)
    db.add(comp)
    db.commit()
    db.refresh(comp)
    return comp


def add_document(db: Session, boat, **fields):
    from captainslog.models import Document

    fields.setdefault("name", "Insurance Policy")
    fields.setdefault("category", "insurance")
    doc = Document(boat_id=boat.id, **fields)
    db.add(doc)
    db.commit()
    db.refresh(doc)
    return doc


def add_safety_item(db: Session, boat, **fields):
    from captainslog.models import SafetyEquipment

    fields.setdefault("type", "fire_extinguisher")
    item = SafetyEquipment(boat_id=boat.id, **fields)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def auth_headers(user) -> dict:
    from captainslog.services.auth import create_access_token

    return {"Authorization": f"Bearer {create_access_token(data={'sub': user.email})}"}
