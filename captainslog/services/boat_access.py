"""Boat access control - owner or active crew grant."""

from __future__ import annotations

import uuid

from sqlalchemy import or_
from sqlalchemy.orm import Session

from captainslog.models import Boat, BoatComponent, BoatCrew, User
from captainslog.models.boat import PERMISSION_ADMIN, PERMISSION_EDIT


class ScheduleChangeForbiddenError(ValueError):
    """Raised when a read-only crew member tries to change a service schedule."""

    pass


def _active_grant(db: Session, boat_id: uuid.UUID, user_id: int) -> BoatCrew | None:
    return (
        db.query(BoatCrew)
        .filter(
            BoatCrew.boat_id == boat_id,
            BoatCrew.user_id == user_id,
            BoatCrew.revoked_at.is_(None),
        )
        .first()
    )


def get_accessible_boat(db: Session, boat_id: uuid.UUID, user: User) -> Boat | None:
    """Return the boat if ``user`` owns it or holds an active crew grant.

    Returns None both when the boat does not exist and when the user has no
    access, so callers answer 404 in both cases.
    """
    boat = db.query(Boat).filter(Boat.id == boat_id).first()
    if boat is None:
        return None
    if boat.owner_id == user.id:
        return boat
    if _active_grant(db, boat.id, user.id) is not None:
        return boat
    return None


def list_accessible_boats(db: Session, user: User) -> list[Boat]:
    """Boats the user owns plus boats shared with them, ordered by name."""
    crew_boat_ids = (
        db.query(BoatCrew.boat_id)
        .filter(BoatCrew.user_id == user.id, BoatCrew.revoked_at.is_(None))
        .scalar_subquery()
    )
    return (
        db.query(Boat)
        .filter(or_(Boat.owner_id == user.id, Boat.id.in_(crew_boat_ids)))
        .order_by(Boat.name)
        .all()
    )


def get_component_for_update(
    db: Session, component_id: uuid.UUID, user: User
) -> BoatComponent | None:
    """Resolve a component the user may reschedule.

    Returns None when the component does not exist or its boat is not
    accessible (caller returns 404). Raises ScheduleChangeForbiddenError for
    crew with read-only permission (caller returns 403).
    """
    component = db.query(BoatComponent).filter(BoatComponent.id == component_id).first()
    if component is None:
        return None
    boat = db.query(Boat).filter(Boat.id == component.boat_id).first()
    if boat is None:
        return None
    if boat.owner_id == user.id:
        return component
    grant = _active_grant(db, boat.id, user.id)
    if grant is None:
        return None
    if grant.permission_level not in (PERMISSION_EDIT, PERMISSION_ADMIN):
        raise ScheduleChangeForbiddenError("Read-only crew cannot change service schedules")
    return component


def get_component_for_read(
    db: Session, component_id: uuid.UUID, user: User
) -> BoatComponent | None:
    """Resolve a component on a boat the user can see, or None."""
    component = db.query(BoatComponent).filter(BoatComponent.id == component_id).first()
    if component is None:
        return None
    if get_accessible_boat(db, component.boat_id, user) is None:
        return None
    return component
