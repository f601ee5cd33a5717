"""Alert ordering: most severe first, soonest due date next."""

from __future__ import annotations

from collections.abc import Iterable

from captainslog.schemas.alerts import Alert
from captainslog.services.alerts.severity import severity_rank


def rank_alerts(alerts: Iterable[Alert]) -> list[Alert]:
    """Return alerts sorted by severity, then due date.

    Within a severity tier, dated alerts come first in ascending date order;
    alerts without a due date (pure hours alerts) follow in the order they
    were generated. ``sorted`` is stable, so equal keys keep input order.
    """

    def _key(alert: Alert) -> tuple:
        if alert.due_date is None:
            return (severity_rank(alert.severity), 1, 0)
        return (severity_rank(alert.severity), 0, alert.due_date.toordinal())

    return sorted(alerts, key=_key)
