"""Timestamp helpers shared by the table accessors and the trend analysis."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any


def now_iso(now: datetime | None = None) -> str:
    """UTC timestamp in ISO-8601 with millisecond precision, e.g. ``2026-10-19T08:30:00.000Z``."""
    moment = (now or datetime.now(UTC)).astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: Any) -> datetime | None:
    """
    Read a record timestamp as an aware UTC datetime.

    Accepts ISO-8601 strings (``Z`` suffix, offsets, or naive meaning UTC)
    and epoch milliseconds as the table service writes ``created_at``.
    Returns None for anything else.
    """
    if isinstance(value, bool) or value is None:
        return None
    try:
        if isinstance(value, int | float):
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        if isinstance(value, str) and value:
            parsed = datetime.fromisoformat(value.strip())
        else:
            return None
    except (ValueError, OverflowError, OSError):
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def month_key(moment: date) -> str:
    """``YYYY-MM`` bucket key."""
    return f"{moment.year:04d}-{moment.month:02d}"


def trailing_months(today: date, count: int = 12) -> list[str]:
    """Month keys for the ``count`` calendar months ending at ``today``'s month, oldest first."""
    keys: list[str] = []
    for back in range(count - 1, -1, -1):
        year, month = divmod(today.year * 12 + today.month - 1 - back, 12)
        keys.append(f"{year:04d}-{month + 1:02d}")
    return keys
