"""
Timestamp utilities for yday.

Handles parsing of commit timestamps from log text and day arithmetic.
Every calendar computation happens in UTC so that a span resolved in
one call buckets commits identically in the next.
"""

import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

# Seconds per relative unit. Months and years are approximations.
UNIT_SECONDS = {
    'second': 1,
    'minute': 60,
    'hour': 60 * 60,
    'day': 24 * 60 * 60,
    'week': 7 * 24 * 60 * 60,
    'month': 30 * 24 * 60 * 60,
    'year': 365 * 24 * 60 * 60,
}

END_OF_DAY = time(23, 59, 59, 999000)

_RELATIVE_PART = re.compile(
    r'^(\d+)\s+(second|minute|hour|day|week|month|year)s?$'
)
_RELATIVE_SEPARATOR = re.compile(r',\s*(?:and\s+)?|\s+and\s+')


def to_utc(dt: datetime) -> datetime:
    """Return an aware UTC datetime; naive input is taken to be UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_timestamp(ts: Optional[str]) -> Optional[datetime]:
    """
    Parse an absolute timestamp into an aware UTC datetime.

    Accepts ISO-8601 (with or without a 'Z' suffix) and git's
    ``--date=iso`` form ``2025-07-28 10:00:00 -0400``.
    Returns None if parsing fails.

    Args:
        ts: Timestamp string

    Returns:
        datetime in UTC, or None if parsing failed
    """
    if not ts:
        return None

    ts = ts.strip()
    try:
        # Handle 'Z' suffix (UTC indicator)
        if ts.endswith('Z'):
            ts = ts[:-1] + '+00:00'
        return to_utc(datetime.fromisoformat(ts))
    except (ValueError, TypeError, OverflowError):
        pass

    for fmt in ('%Y-%m-%d %H:%M:%S %z', '%Y-%m-%d %H:%M %z', '%a %b %d %H:%M:%S %Y %z'):
        try:
            return to_utc(datetime.strptime(ts, fmt))
        except (ValueError, OverflowError):
            continue
    return None


def parse_relative(text: Optional[str], now: datetime) -> Optional[datetime]:
    """
    Resolve a relative phrase such as "3 hours ago" against now.

    Compound phrases ("1 year, 2 months ago") add up their parts.
    Returns None when the phrase is not a relative time.
    """
    if not text:
        return None

    text = text.strip().lower()
    if not text.endswith(' ago'):
        return None

    body = text[:-len(' ago')].strip()
    total_seconds = 0
    for part in _RELATIVE_SEPARATOR.split(body):
        match = _RELATIVE_PART.match(part.strip())
        if not match:
            return None
        total_seconds += int(match.group(1)) * UNIT_SECONDS[match.group(2)]

    try:
        return to_utc(now) - timedelta(seconds=total_seconds)
    except OverflowError:
        return None


def parse_temporal_marker(text: Optional[str], now: datetime) -> Optional[datetime]:
    """Parse either a relative phrase or an absolute timestamp."""
    relative = parse_relative(text, now)
    if relative is not None:
        return relative
    return parse_timestamp(text)


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse YYYY-MM-DD (or any ISO timestamp) to a date, None on failure."""
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        parsed = parse_timestamp(value)
        return parsed.date() if parsed else None


def start_of_day(day: date) -> datetime:
    """00:00:00.000 UTC on the given date."""
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def end_of_day(day: date) -> datetime:
    """23:59:59.999 UTC on the given date."""
    return datetime.combine(day, END_OF_DAY, tzinfo=timezone.utc)


def format_day(day: date) -> str:
    """'Tuesday, July 29' style label."""
    return f"{day:%A}, {day:%B} {day.day}"


def format_long_day(day: date) -> str:
    """'Monday, July 28, 2025' style label."""
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"
