"""Scheduled job endpoints.

Secured with a shared secret (``Authorization: Bearer <CRON_SECRET>``),
NOT user auth. Meant for the external scheduler only.
"""

from __future__ import annotations

import logging
import secrets
from datetime import datetime

from fastapi import APIRouter, Depends, Header, HTTPException
from sqlalchemy.orm import Session

from captainslog.api.deps import get_now
from captainslog.config import get_settings
from captainslog.db.session import get_db
from captainslog.schemas.notifications import DigestRunResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cron", include_in_schema=False)


# ── Secret dependency ───────────────────────────────────────────────


def _require_cron_secret(authorization: str | None = Header(None)) -> None:
    """Validate the bearer secret from the Authorization header.

    Uses constant-time comparison. Raises 401 if the header is missing, the
    secret is not configured, or it does not match.
    """
    expected = get_settings().cron_secret
    supplied = ""
    if authorization and authorization.startswith("Bearer "):
        supplied = authorization[len("Bearer ") :]
    if not expected or not supplied or not secrets.compare_digest(supplied, expected):
        logger.warning("Cron endpoint auth failed: invalid or missing secret")
        raise HTTPException(status_code=401, detail="Unauthorized")


# ── Endpoints ───────────────────────────────────────────────────────


@router.get("/notifications", response_model=DigestRunResponse)
def run_notifications(
    db: Session = Depends(get_db),
    _secret: None = Depends(_require_cron_secret),
    now: datetime = Depends(get_now),
) -> DigestRunResponse:
    """Send the maintenance alert digest to every opted-in user.

    Per-user send failures are reported in ``results``; the batch itself only
    fails on storage errors.
    """
    from captainslog.services.digest import run_notification_digest

    try:
        return run_notification_digest(db, now)
    except Exception:
        logger.exception("Notification digest failed")
        raise HTTPException(status_code=500, detail="Internal server error") from None
