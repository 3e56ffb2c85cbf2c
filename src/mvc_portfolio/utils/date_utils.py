"""Date formatting helpers used as template filters.

All dates are rendered in UTC so that output does not depend on the server
timezone.
"""

from datetime import datetime
from typing import Optional, Union

import pytz

DateLike = Union[str, datetime]


def _to_utc(value: DateLike) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        # SQLite drops tzinfo; stored values are UTC
        return pytz.utc.localize(value)
    return value.astimezone(pytz.utc)


def format_date(value: DateLike) -> str:
    """Format as e.g. ``Sep 6, 2025``."""
    date = _to_utc(value)
    return f"{date:%b} {date.day}, {date.year}"


def format_datetime(value: DateLike) -> str:
    """Format as e.g. ``Sep 6, 2025, 03:18 PM``."""
    date = _to_utc(value)
    return f"{format_date(date)}, {date:%I:%M %p}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def format_relative_time(value: DateLike, now: Optional[datetime] = None) -> str:
    """Describe how long ago ``value`` was.

    Args:
        value: The past moment.
        now: Reference time, defaults to the current UTC time.

    Returns:
        "Just now", "N minutes ago", "N hours ago", "N days ago", or the
        formatted date once 30 days have passed.
    """
    date = _to_utc(value)
    now = _to_utc(now) if now is not None else datetime.now(pytz.utc)
    seconds = int((now - date).total_seconds())

    if seconds < 60:
        return "Just now"
    if seconds < 3600:
        return _plural(seconds // 60, "minute")
    if seconds < 86400:
        return _plural(seconds // 3600, "hour")
    if seconds < 2592000:
        return _plural(seconds // 86400, "day")
    return format_date(date)
