"""Forward projection of service schedules and scan-date normalisation.

Every path that moves a due point (alert dismissal, maintenance log
creation, quick-complete) goes through ``advance_date`` / ``advance_hours``
so the alert scan and the log-driven schedule agree.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo


def advance_date(base: date, interval_days: int | None) -> date | None:
    """Next due date one interval after ``base``; None when no interval is set."""
    if not interval_days:
        return None
    return base + timedelta(days=interval_days)


def advance_hours(base: int | None, interval_hours: int | None) -> int | None:
    """Next due running-hours one interval after ``base``; None when unknown."""
    if not interval_hours or base is None:
        return None
    return base + interval_hours


def scan_date(now: datetime | date, tz_name: str = "UTC") -> date:
    """Calendar date for ``now`` with time of day stripped.

    Aware datetimes are converted to ``tz_name`` first; naive datetimes are
    taken as already local. Plain dates pass through.
    """
    if isinstance(now, datetime):
        if now.tzinfo is not None:
            now = now.astimezone(ZoneInfo(tz_name))
        return now.date()
    return now


def days_between(today: date, due: date) -> int:
    """Whole days from ``today`` until ``due`` (negative when past)."""
    return (due - today).days
