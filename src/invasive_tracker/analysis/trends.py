"""Time-bucketed report counts."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any

from invasive_tracker.dates import month_key, parse_timestamp, trailing_months

WINDOW_MONTHS = 12


def _report_moment(report: Any) -> datetime | None:
    if not isinstance(report, dict):
        return None
    return parse_timestamp(report.get("report_date") or report.get("created_at"))


def monthly_reports(
    reports: list[dict[str, Any]],
    today: date | None = None,
) -> dict[str, int]:
    """
    Count reports per month over the trailing 12 months.

    The result always holds exactly 12 ``YYYY-MM`` keys, oldest first, ending
    at the current (UTC) month and starting at 0.  Each report is dated by
    ``report_date``, falling back to ``created_at``.  Reports without a
    readable date, or dated outside the window, are left out.

    Args:
        reports: Sighting report records.
        today: Reference day for the window. Defaults to today in UTC.
    """
    today = today or datetime.now(UTC).date()
    monthly = dict.fromkeys(trailing_months(today, WINDOW_MONTHS), 0)
    for report in reports:
        moment = _report_moment(report)
        if moment is None:
            continue
        key = month_key(moment)
        if key in monthly:
            monthly[key] += 1
    return monthly
