"""Date parsing utilities."""

import re
from datetime import datetime, timedelta, UTC, tzinfo
from typing import Optional

from dateutil import parser as date_parser
from dateutil import tz as date_tz


def parse_datetime(
    date_str: str,
    now: Optional[datetime] = None,
    local_tz: Optional[tzinfo] = None,
) -> datetime:
    """Parse a date string into an aware UTC datetime.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "2024-01-15 14:30", "January 15, 2024"
    - Relative dates: "now", "today", "yesterday", "3 days ago"

    Relative dates keep the current time of day. Absolute dates without a
    time zone are read as local time.

    Args:
        date_str: Date string in various formats
        now: Reference instant for relative dates (defaults to current time)
        local_tz: Zone for naive absolute dates (defaults to system local)

    Returns:
        Aware datetime in UTC

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if now is None:
        now = datetime.now(UTC)
    if local_tz is None:
        local_tz = date_tz.tzlocal()

    relative_dates = {
        "now": now,
        "today": now,
        "yesterday": now - timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str].astimezone(UTC)

    match = re.fullmatch(r"(\d+)\s+days?\s+ago", date_str)
    if match:
        return (now - timedelta(days=int(match.group(1)))).astimezone(UTC)

    try:
        dt = date_parser.parse(date_str)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=local_tz)
    return dt.astimezone(UTC)
