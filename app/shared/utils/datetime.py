"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system are timezone-aware UTC. Use these
helpers instead of datetime.now() or datetime.utcnow().
"""

import calendar
from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def current_month_range(now: datetime) -> tuple[datetime, datetime]:
    """
    Return (first instant of now's month, now) in UTC.

    Args:
        now: Reference instant (aware or naive UTC)

    Returns:
        Inclusive start and end of the current-month window
    """
    now = ensure_utc(now)
    start = datetime(now.year, now.month, 1, tzinfo=UTC)
    return start, now


def previous_month_range(now: datetime) -> tuple[datetime, datetime]:
    """
    Return the full calendar month before now's month, in UTC.

    The end is the last second of the last day (23:59:59.999999).
    """
    now = ensure_utc(now)
    year, month = (now.year - 1, 12) if now.month == 1 else (now.year, now.month - 1)
    last_day = calendar.monthrange(year, month)[1]
    start = datetime(year, month, 1, tzinfo=UTC)
    end = datetime(year, month, last_day, 23, 59, 59, 999999, tzinfo=UTC)
    return start, end
