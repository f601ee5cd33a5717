"""Alert engine - severity, generation, ranking and schedule projection."""

from captainslog.services.alerts.generator import (
    SAFETY_TYPE_LABELS,
    ScanWindow,
    generate_alerts,
    generate_alerts_for_boats,
    scan_component_dates,
    scan_component_hours,
    scan_documents,
    scan_safety_equipment,
)
from captainslog.services.alerts.ranker import rank_alerts
from captainslog.services.alerts.schedule import advance_date, advance_hours, scan_date
from captainslog.services.alerts.severity import (
    SeverityThresholds,
    classify_hours_severity,
    classify_severity,
    severity_rank,
)

__all__ = [
    "SAFETY_TYPE_LABELS",
    "ScanWindow",
    "SeverityThresholds",
    "advance_date",
    "advance_hours",
    "classify_hours_severity",
    "classify_severity",
    "generate_alerts",
    "generate_alerts_for_boats",
    "rank_alerts",
    "scan_component_dates",
    "scan_component_hours",
    "scan_date",
    "scan_documents",
    "scan_safety_equipment",
    "severity_rank",
]
