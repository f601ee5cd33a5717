"""Scheduled email digest of due maintenance and expiring documents.

For every user with email notifications enabled, re-runs the alert scans over
the boats they own with the user's own lookahead (``advance_notice_days``)
and sends one email listing every qualifying item. Users without items get
no email. A failure for one user is recorded in the run summary and does not
stop the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime

from sqlalchemy.orm import Session

from captainslog.config import get_settings
from captainslog.models import Boat, NotificationPreferences, User
from captainslog.schemas.alerts import Alert, AlertType
from captainslog.schemas.notifications import DigestRunResponse, DigestUserResult
from captainslog.services.alerts.generator import (
    ScanWindow,
    load_components,
    load_expiring_documents,
    scan_component_dates,
    scan_component_hours,
    scan_documents,
)
from captainslog.services.alerts.ranker import rank_alerts
from captainslog.services.alerts.schedule import days_between, scan_date
from captainslog.services.alerts.severity import SeverityThresholds
from captainslog.services.email_service import (
    DigestItem,
    EmailResult,
    build_digest_html,
    build_digest_text,
    digest_subject,
    send_email,
)

logger = logging.getLogger(__name__)

SendFn = Callable[..., EmailResult]


def digest_window(prefs: NotificationPreferences, settings) -> ScanWindow:
    """Lookahead for one user: today..advance_notice_days; hours stay fixed."""
    return ScanWindow(
        max_days=prefs.advance_notice_days or settings.digest_advance_notice_days,
        max_hours=settings.alert_hours_lookahead,
        min_days=0,
        document_reminder_days=None,
    )


def _due_text(alert: Alert, today: date) -> str:
    if alert.type == AlertType.MAINTENANCE_HOURS:
        remaining = alert.due_hours - alert.current_hours
        return "Overdue!" if remaining <= 0 else f"{remaining} hrs"
    days = days_between(today, alert.due_date)
    if days < 0:
        return "Expired!" if alert.type == AlertType.DOCUMENT_EXPIRY else "Overdue!"
    if days == 0:
        return "Due today"
    return "1 day" if days == 1 else f"{days} days"


def _link(alert: Alert, base_url: str) -> str:
    if alert.component_id is not None:
        return f"{base_url}/boats/{alert.boat_id}/components/{alert.component_id}"
    return f"{base_url}/boats/{alert.boat_id}"


def build_user_digest(
    db: Session,
    prefs: NotificationPreferences,
    boats: list[Boat],
    now: datetime | date,
    *,
    settings=None,
) -> list[DigestItem]:
    """Collect the digest items for one user across their boats, most urgent first."""
    if settings is None:
        settings = get_settings()
    if not boats:
        return []
    today = scan_date(now, settings.alert_timezone)
    window = digest_window(prefs, settings)
    thresholds = SeverityThresholds.from_settings(settings)
    boat_ids = [b.id for b in boats]

    components_by_boat: dict = {}
    if prefs.notify_maintenance_due or prefs.notify_hours_threshold:
        for comp in load_components(db, boat_ids):
            components_by_boat.setdefault(comp.boat_id, []).append(comp)
    documents_by_boat: dict = {}
    if prefs.notify_document_expiry:
        for doc in load_expiring_documents(db, boat_ids):
            documents_by_boat.setdefault(doc.boat_id, []).append(doc)

    alerts: list[Alert] = []
    for boat in boats:
        if prefs.notify_document_expiry:
            alerts.extend(
                scan_documents(documents_by_boat.get(boat.id, []), boat, today, window, thresholds)
            )
        comps = components_by_boat.get(boat.id, [])
        if prefs.notify_maintenance_due:
            alerts.extend(scan_component_dates(comps, boat, today, window, thresholds))
        if prefs.notify_hours_threshold:
            alerts.extend(scan_component_hours(comps, boat, window, thresholds))

    return [
        DigestItem(
            id=alert.id,
            title=alert.title,
            boat_name=alert.boat_name or "Unknown boat",
            due_text=_due_text(alert, today),
            type=alert.type.value,
            severity=alert.severity,
            link=_link(alert, settings.app_base_url),
        )
        for alert in rank_alerts(alerts)
    ]


def _process_user(
    db: Session,
    prefs: NotificationPreferences,
    user: User,
    now: datetime | date,
    send: SendFn,
    settings,
) -> DigestUserResult | None:
    """Build and send one user's digest. None when there is nothing to send."""
    email_to = prefs.email_address or user.email
    if not email_to:
        return None

    boats = db.query(Boat).filter(Boat.owner_id == user.id).order_by(Boat.name).all()
    items = build_user_digest(db, prefs, boats, now, settings=settings)
    if not items:
        return None

    result = send(
        to=email_to,
        subject=digest_subject(len(items)),
        html_body=build_digest_html(items, settings.app_base_url),
        text_body=build_digest_text(items, settings.app_base_url),
    )
    if not result.success:
        logger.warning("digest_send_failed: user_id=%s error=%s", user.id, result.error)
    return DigestUserResult(
        user_id=user.id,
        sent=result.success,
        alert_count=len(items),
        error=result.error,
    )


def run_notification_digest(
    db: Session,
    now: datetime | date | None = None,
    *,
    send: SendFn = send_email,
    settings=None,
) -> DigestRunResponse:
    """Run one digest batch over all users with email notifications enabled.

    Args:
        db: Database session.
        now: Batch clock (default: current UTC time).
        send: Email collaborator; must return EmailResult and not raise.
        settings: Optional settings override.

    Returns:
        DigestRunResponse with per-user results, users sent and total items.
    """
    if settings is None:
        settings = get_settings()
    if now is None:
        now = datetime.now().astimezone()

    prefs_rows = (
        db.query(NotificationPreferences)
        .filter(NotificationPreferences.email_enabled.is_(True))
        .order_by(NotificationPreferences.user_id)
        .all()
    )
    if not prefs_rows:
        return DigestRunResponse(
            message="No users with notifications enabled", sent=0, total_alerts=0
        )

    results: list[DigestUserResult] = []
    for prefs in prefs_rows:
        user = prefs.user
        if user is None:
            continue
        try:
            outcome = _process_user(db, prefs, user, now, send, settings)
        except Exception as exc:
            logger.exception("digest_user_failed: user_id=%s", user.id)
            db.rollback()
            outcome = DigestUserResult(user_id=user.id, sent=False, alert_count=0, error=str(exc))
        if outcome is not None:
            results.append(outcome)

    sent = sum(1 for r in results if r.sent)
    total_alerts = sum(r.alert_count for r in results)
    logger.info(
        "digest_completed: users=%d processed=%d sent=%d total_alerts=%d",
        len(prefs_rows),
        len(results),
        sent,
        total_alerts,
    )
    return DigestRunResponse(
        message=f"Processed {len(results)} users",
        sent=sent,
        total_alerts=total_alerts,
        results=results,
    )
