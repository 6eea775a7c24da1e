"""
Timespan resolution for yday.

Step 1 of the timeline pipeline: turns a time directive and the current
instant into an exact, day-aligned UTC window. Never raises; anything it
cannot make sense of resolves to the smart-yesterday default.
"""

import re
from datetime import date, datetime, timedelta
from typing import Optional

from yday.models.entities import DirectiveKind, SpanKind, TimeDirective, TimeSpan
from yday.utils.timestamps import end_of_day, format_day, start_of_day, to_utc

WEEKDAY_NAMES = ['monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday']

MONDAY = 0
FRIDAY = 4
SUNDAY = 6

DEFAULT_RANGE_DAYS = 30


def resolve(directive: Optional[TimeDirective], now: datetime) -> TimeSpan:
    """
    Determine the exact timespan for a directive.

    Args:
        directive: Requested time intent, or None for the default
        now: Current instant (naive values are taken as UTC)

    Returns:
        An immutable TimeSpan
    """
    now = to_utc(now)
    today = now.date()

    if directive is None:
        return _smart_yesterday(now, today)

    try:
        span = _resolve_directive(directive, now, today)
    except OverflowError:
        # Offsets that leave the calendar
        span = None
    return span if span is not None else _smart_yesterday(now, today)


def _resolve_directive(directive: TimeDirective, now: datetime, today: date) -> Optional[TimeSpan]:
    kind = directive.kind
    if kind == DirectiveKind.LAST_WEEKDAY and _is_weekday(directive.weekday):
        return _last_weekday(now, today, directive.weekday)
    if kind == DirectiveKind.LAST_WORKDAY:
        return _last_workday(now, today)
    if kind == DirectiveKind.DAYS_AGO and _is_count(directive.days, minimum=0):
        return _days_ago(now, today, directive.days)
    if kind == DirectiveKind.TODAY:
        return _single_day(now, today, 'today')
    if kind == DirectiveKind.LAST_N_DAYS and _is_count(directive.days, minimum=1):
        return _last_n_days(now, today, directive.days)
    if kind == DirectiveKind.DATE_RANGE:
        return _date_range(now, today, directive.after, directive.before)
    return None


def parse_directive(text: Optional[str]) -> TimeDirective:
    """
    Map a human phrase to a directive.

    Understands "today", "yesterday", "last tuesday", "last-workday",
    "3 days ago" and "last 3 days". Anything else is the default.
    """
    if not text:
        return TimeDirective()

    phrase = re.sub(r'[\s_-]+', ' ', text.strip().lower())

    if phrase == 'today':
        return TimeDirective.today()
    if phrase == 'yesterday':
        return TimeDirective.days_ago(1)
    if phrase in ('last workday', 'last work day'):
        return TimeDirective.last_workday()

    match = re.fullmatch(r'last (\w+)', phrase)
    if match and match.group(1) in WEEKDAY_NAMES:
        return TimeDirective.last_weekday(WEEKDAY_NAMES.index(match.group(1)))

    match = re.fullmatch(r'(\d+) days? ago', phrase)
    if match:
        return TimeDirective.days_ago(int(match.group(1)))

    match = re.fullmatch(r'last (\d+) days?', phrase)
    if match:
        return TimeDirective.last_n_days(int(match.group(1)))

    return TimeDirective()


def _is_weekday(value) -> bool:
    return isinstance(value, int) and 0 <= value <= 6


def _is_count(value, minimum: int) -> bool:
    return isinstance(value, int) and value >= minimum


def _single_day(
    now: datetime,
    day: date,
    description: str,
    kind: SpanKind = SpanKind.SINGLE_DAY
) -> TimeSpan:
    return TimeSpan(
        kind=kind,
        reference_now=now,
        start=start_of_day(day),
        end=end_of_day(day),
        description=description,
    )


def days_back_to_weekday(today: date, target: int) -> int:
    """Days back to the previous target weekday; a full week if today matches."""
    days_back = (today.weekday() - target) % 7
    return days_back or 7


def _last_weekday(now: datetime, today: date, target: int) -> TimeSpan:
    day = today - timedelta(days=days_back_to_weekday(today, target))
    return _single_day(now, day, format_day(day))


def _last_workday(now: datetime, today: date) -> TimeSpan:
    weekday = today.weekday()
    if weekday == MONDAY:
        days_back = 3
    elif weekday == SUNDAY:
        days_back = 2
    else:
        days_back = 1
    day = today - timedelta(days=days_back)
    return _single_day(now, day, f"last workday, {format_day(day)}")


def _days_ago(now: datetime, today: date, days: int) -> TimeSpan:
    day = today - timedelta(days=days)
    return _single_day(now, day, f"{days} day{'' if days == 1 else 's'} ago")


def _last_n_days(now: datetime, today: date, days: int) -> TimeSpan:
    # Today is day 1 of N
    first = today - timedelta(days=days - 1)
    return TimeSpan(
        kind=SpanKind.MULTI_DAY,
        reference_now=now,
        start=start_of_day(first),
        end=end_of_day(today),
        description=f"last {days} day{'' if days == 1 else 's'}",
    )


def _date_range(
    now: datetime,
    today: date,
    after: Optional[date],
    before: Optional[date]
) -> Optional[TimeSpan]:
    first = after if after is not None else today - timedelta(days=DEFAULT_RANGE_DAYS)
    last = before if before is not None else today
    if isinstance(first, datetime):
        first = to_utc(first).date()
    if isinstance(last, datetime):
        last = to_utc(last).date()
    if not isinstance(first, date) or not isinstance(last, date) or first > last:
        return None

    return TimeSpan(
        kind=SpanKind.DATE_RANGE,
        reference_now=now,
        start=start_of_day(first),
        end=end_of_day(last),
        description=f"{first.isoformat()} to {last.isoformat()}",
    )


def _smart_yesterday(now: datetime, today: date) -> TimeSpan:
    if today.weekday() == MONDAY:
        # Skip the weekend
        day = today - timedelta(days=3)
        description = f"since {format_day(day)}"
    else:
        day = today - timedelta(days=1)
        description = f"yesterday, {format_day(day)}"
    return _single_day(now, day, description, kind=SpanKind.SMART_YESTERDAY)
