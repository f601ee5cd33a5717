"""Severity classifier tests: tier boundaries, configurable cutoffs, lookup tables."""

from __future__ import annotations

import pytest

from captainslog.schemas.alerts import Severity
from captainslog.services.alerts.severity import (
    SeverityThresholds,
    classify_hours_severity,
    classify_severity,
    severity_color,
    severity_label,
    severity_rank,
)


@pytest.mark.parametrize("days", range(-40, 41))
def test_classify_severity_tiers_cover_every_day_count(days: int) -> None:
    severity = classify_severity(days)
    if days < 0:
        assert severity is Severity.OVERDUE
    elif days <= 3:
        assert severity is Severity.URGENT
    elif days <= 30:
        assert severity is Severity.UPCOMING
    else:
        assert severity is Severity.INFO


@pytest.mark.parametrize(
    ("days", "expected"),
    [
        (-1, Severity.OVERDUE),
        (0, Severity.URGENT),
        (3, Severity.URGENT),
        (4, Severity.UPCOMING),
        (30, Severity.UPCOMING),
        (31, Severity.INFO),
    ],
)
def test_classify_severity_boundaries(days: int, expected: Severity) -> None:
    assert classify_severity(days) is expected


@pytest.mark.parametrize(
    ("hours", "expected"),
    [
        (-5, Severity.OVERDUE),
        (-1, Severity.OVERDUE),
        (0, Severity.URGENT),
        (10, Severity.URGENT),
        (11, Severity.UPCOMING),
        (50, Severity.UPCOMING),
        (51, Severity.INFO),
    ],
)
def test_classify_hours_severity_boundaries(hours: int, expected: Severity) -> None:
    assert classify_hours_severity(hours) is expected


def test_thresholds_are_configurable() -> None:
    strict = SeverityThresholds(urgent_days=7, upcoming_days=14, urgent_hours=25)
    assert classify_severity(7, strict) is Severity.URGENT
    assert classify_severity(15, strict) is Severity.INFO
    assert classify_hours_severity(20, strict) is Severity.URGENT


def test_thresholds_from_settings() -> None:
    from types import SimpleNamespace

    settings = SimpleNamespace(
        alert_urgent_days=2,
        alert_lookahead_days=20,
        alert_hours_urgent=5,
        alert_hours_lookahead=40,
    )
    t = SeverityThresholds.from_settings(settings)
    assert t == SeverityThresholds(urgent_days=2, upcoming_days=20, urgent_hours=5, upcoming_hours=40)


def test_severity_rank_orders_most_severe_first() -> None:
    ordered = sorted(Severity, key=severity_rank)
    assert ordered == [Severity.OVERDUE, Severity.URGENT, Severity.UPCOMING, Severity.INFO]


@pytest.mark.parametrize("severity", list(Severity))
def test_every_severity_has_label_and_color(severity: Severity) -> None:
    assert severity_label(severity)
    assert severity_color(severity).startswith("#")
