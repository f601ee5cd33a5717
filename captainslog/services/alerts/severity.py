"""Severity classification for date- and hours-based alerts.

Pure functions; thresholds come from a SeverityThresholds value so callers
(and tests) decide the policy without touching global state.
"""

from __future__ import annotations

from dataclasses import dataclass

from captainslog.schemas.alerts import Severity

# ── Default thresholds ───────────────────────────────────────────────────

URGENT_DAYS: int = 3
UPCOMING_DAYS: int = 30
URGENT_HOURS: int = 10
UPCOMING_HOURS: int = 50


@dataclass(frozen=True)
class SeverityThresholds:
    """Inclusive upper bounds for the urgent and upcoming tiers."""

    urgent_days: int = URGENT_DAYS
    upcoming_days: int = UPCOMING_DAYS
    urgent_hours: int = URGENT_HOURS
    upcoming_hours: int = UPCOMING_HOURS

    @classmethod
    def from_settings(cls, settings) -> SeverityThresholds:
        return cls(
            urgent_days=settings.alert_urgent_days,
            upcoming_days=settings.alert_lookahead_days,
            urgent_hours=settings.alert_hours_urgent,
            upcoming_hours=settings.alert_hours_lookahead,
        )


DEFAULT_THRESHOLDS = SeverityThresholds()


def classify_severity(
    days_until_due: int, thresholds: SeverityThresholds = DEFAULT_THRESHOLDS
) -> Severity:
    """Map calendar days remaining to a severity tier.

    <0 overdue; 0..urgent_days urgent; ..upcoming_days upcoming; else info.
    """
    if days_until_due < 0:
        return Severity.OVERDUE
    if days_until_due <= thresholds.urgent_days:
        return Severity.URGENT
    if days_until_due <= thresholds.upcoming_days:
        return Severity.UPCOMING
    return Severity.INFO


def classify_hours_severity(
    hours_remaining: int, thresholds: SeverityThresholds = DEFAULT_THRESHOLDS
) -> Severity:
    """Map running hours remaining to a severity tier."""
    if hours_remaining < 0:
        return Severity.OVERDUE
    if hours_remaining <= thresholds.urgent_hours:
        return Severity.URGENT
    if hours_remaining <= thresholds.upcoming_hours:
        return Severity.UPCOMING
    return Severity.INFO


def severity_rank(severity: Severity) -> int:
    """Sort ordinal: overdue=0 ... info=3."""
    match severity:
        case Severity.OVERDUE:
            return 0
        case Severity.URGENT:
            return 1
        case Severity.UPCOMING:
            return 2
        case Severity.INFO:
            return 3


def severity_label(severity: Severity) -> str:
    match severity:
        case Severity.OVERDUE:
            return "Overdue"
        case Severity.URGENT:
            return "Due soon"
        case Severity.UPCOMING:
            return "Upcoming"
        case Severity.INFO:
            return "Scheduled"


def severity_color(severity: Severity) -> str:
    """Badge colour (hex) used by the digest email."""
    match severity:
        case Severity.OVERDUE:
            return "#dc2626"
        case Severity.URGENT:
            return "#f59e0b"
        case Severity.UPCOMING:
            return "#3b82f6"
        case Severity.INFO:
            return "#6b7280"
