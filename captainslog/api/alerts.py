"""Alert API routes - per-boat and cross-boat alert lists."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from captainslog.api.deps import get_db, get_now, require_auth
from captainslog.models.user import User
from captainslog.schemas.alerts import AlertListResponse
from captainslog.services.alerts import generate_alerts, generate_alerts_for_boats, rank_alerts
from captainslog.services.boat_access import get_accessible_boat, list_accessible_boats

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/boats/{boat_id}/alerts",
    response_model=AlertListResponse,
    response_model_exclude_none=True,
)
def api_boat_alerts(
    boat_id: uuid.UUID,
    db: Session = Depends(get_db),
    user: User = Depends(require_auth),
    now: datetime = Depends(get_now),
) -> AlertListResponse:
    """Ranked alerts for one boat. 404 when missing or not shared with the caller."""
    boat = get_accessible_boat(db, boat_id, user)
    if boat is None:
        raise HTTPException(status_code=404, detail="Boat not found")
    try:
        alerts = rank_alerts(generate_alerts(db, boat, now))
    except SQLAlchemyError:
        logger.exception("Alert generation failed: boat_id=%s", boat_id)
        raise HTTPException(status_code=500, detail="Internal server error") from None
    return AlertListResponse(alerts=alerts)


@router.get("/alerts", response_model=AlertListResponse, response_model_exclude_none=True)
def api_all_alerts(
    db: Session = Depends(get_db),
    user: User = Depends(require_auth),
    now: datetime = Depends(get_now),
) -> AlertListResponse:
    """Ranked alerts across every boat the caller owns or crews on."""
    try:
        boats = list_accessible_boats(db, user)
        alerts = rank_alerts(generate_alerts_for_boats(db, boats, now))
    except SQLAlchemyError:
        logger.exception("Alert generation failed: user_id=%s", user.id)
        raise HTTPException(status_code=500, detail="Internal server error") from None
    return AlertListResponse(alerts=alerts)
