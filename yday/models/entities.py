"""
Data structures (entities) for yday.

Uses dataclasses for clean, typed data structures.
Named 'entities' instead of 'dataclasses' to avoid stdlib import confusion.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Tuple


EMPTY_MARKER = '·'  # middle dot
OVERFLOW_MARKER = '+'
DIGIT_MARKERS = '123456789'
SATURATION_COUNT = 10


class SpanKind(str, Enum):
    """How a TimeSpan was produced."""
    SINGLE_DAY = 'single-day'
    MULTI_DAY = 'multi-day'
    DATE_RANGE = 'date-range'
    SMART_YESTERDAY = 'smart-yesterday'


class DirectiveKind(str, Enum):
    """The closed set of time intents a caller can ask for."""
    LAST_WEEKDAY = 'last-weekday'
    LAST_WORKDAY = 'last-workday'
    DAYS_AGO = 'days-ago'
    TODAY = 'today'
    LAST_N_DAYS = 'last-n-days'
    DATE_RANGE = 'date-range'
    DEFAULT = 'default'


class DisplayKind(str, Enum):
    """Rendering mode of a timeline."""
    SINGLE_DAY = 'single-day'
    WEEK_PATTERN = 'week-pattern'


@dataclass(frozen=True)
class TimeDirective:
    """
    A single time intent.

    weekday uses Python numbering (0=Monday, 6=Sunday).
    """
    kind: DirectiveKind = DirectiveKind.DEFAULT
    weekday: Optional[int] = None
    days: Optional[int] = None
    after: Optional[date] = None
    before: Optional[date] = None

    @classmethod
    def last_weekday(cls, weekday: int) -> 'TimeDirective':
        return cls(DirectiveKind.LAST_WEEKDAY, weekday=weekday)

    @classmethod
    def last_workday(cls) -> 'TimeDirective':
        return cls(DirectiveKind.LAST_WORKDAY)

    @classmethod
    def days_ago(cls, days: int) -> 'TimeDirective':
        return cls(DirectiveKind.DAYS_AGO, days=days)

    @classmethod
    def today(cls) -> 'TimeDirective':
        return cls(DirectiveKind.TODAY)

    @classmethod
    def last_n_days(cls, days: int) -> 'TimeDirective':
        return cls(DirectiveKind.LAST_N_DAYS, days=days)

    @classmethod
    def date_range(
        cls,
        after: Optional[date] = None,
        before: Optional[date] = None
    ) -> 'TimeDirective':
        return cls(DirectiveKind.DATE_RANGE, after=after, before=before)


@dataclass(frozen=True)
class TimeSpan:
    """
    A resolved, day-aligned UTC window.

    start and end are aware UTC datetimes at 00:00:00.000 and
    23:59:59.999 respectively.
    """
    kind: SpanKind
    reference_now: datetime
    start: datetime
    end: datetime
    description: str

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()

    @property
    def is_single_day(self) -> bool:
        """True when start and end fall on the same calendar date."""
        return self.start_date == self.end_date


@dataclass(frozen=True)
class CommitRecord:
    """One commit parsed from a log line."""
    id: str
    message: str
    author: str
    author_instant: datetime


@dataclass
class RepositoryActivity:
    """Commits for one repository, already restricted to a TimeSpan."""
    repository_name: str
    commits: List[CommitRecord] = field(default_factory=list)

    @property
    def commit_count(self) -> int:
        return len(self.commits)


@dataclass(frozen=True)
class WeekPattern:
    """
    Seven Monday-first symbols encoding per-day commit counts.

    Each symbol is EMPTY_MARKER (0), a digit 1-9, or OVERFLOW_MARKER
    (10 or more). Once any slot overflows the pattern only gives a lower
    bound on the total.
    """
    symbols: Tuple[str, ...]

    def __post_init__(self):
        if len(self.symbols) != 7:
            raise ValueError(f"Week pattern needs 7 symbols, got {len(self.symbols)}")
        for symbol in self.symbols:
            if symbol not in (EMPTY_MARKER, OVERFLOW_MARKER) and symbol not in DIGIT_MARKERS:
                raise ValueError(f"Unknown week pattern symbol: {symbol!r}")

    @classmethod
    def from_counts(cls, counts: List[int]) -> 'WeekPattern':
        """Encode seven per-day counts."""
        return cls(tuple(encode_count(c) for c in counts))

    @classmethod
    def from_string(cls, text: str) -> 'WeekPattern':
        return cls(tuple(text))

    @property
    def is_saturated(self) -> bool:
        """True when at least one day hit the overflow marker."""
        return OVERFLOW_MARKER in self.symbols

    def __str__(self) -> str:
        return ''.join(self.symbols)


def encode_count(count: int) -> str:
    """Encode one day's commit count as a single pattern symbol."""
    if count <= 0:
        return EMPTY_MARKER
    if count >= SATURATION_COUNT:
        return OVERFLOW_MARKER
    return str(count)


@dataclass(frozen=True)
class TimelineItem:
    """One row of a timeline."""
    repository_name: str
    total_commits: int
    display_kind: DisplayKind
    pattern: Optional[WeekPattern] = None


@dataclass
class ValidationResult:
    """Outcome of checking timeline patterns against their totals."""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)

    def __bool__(self):
        return self.is_valid


@dataclass
class TimelineReport:
    """Everything a renderer needs for one timeline run."""
    span: TimeSpan
    window: TimeSpan
    display_kind: DisplayKind
    title: str
    items: List[TimelineItem] = field(default_factory=list)
    validation: ValidationResult = field(default_factory=ValidationResult)


@dataclass
class RepositorySummary:
    """Heuristic one-line summary of a repository's commits."""
    repository_name: str
    commit_count: int
    summary: str
