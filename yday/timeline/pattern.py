"""
Timeline pattern generation for yday.

Step 3 of the timeline pipeline. Single-day spans become a flat
per-repository count; everything else (or a forced week view) becomes a
Monday-first seven-symbol pattern such as ``2··1+··``.
"""

from datetime import date, timedelta
from typing import Iterable, List, Optional

from yday.models.entities import (
    DisplayKind, RepositoryActivity, SpanKind, TimelineItem, TimeSpan, WeekPattern,
)
from yday.utils.timestamps import end_of_day, format_long_day, start_of_day


def display_kind(span: TimeSpan, force_week_view: bool = False) -> DisplayKind:
    """Pick the rendering mode for a span."""
    if not force_week_view and span.is_single_day:
        return DisplayKind.SINGLE_DAY
    return DisplayKind.WEEK_PATTERN


def week_start(span: TimeSpan) -> date:
    """
    Monday of the ISO week the pattern covers.

    Single-day spans use their own date, longer spans their end date.
    """
    reference = span.start_date if span.is_single_day else span.end_date
    return reference - timedelta(days=reference.weekday())


def ingestion_window(span: TimeSpan, force_week_view: bool = False) -> TimeSpan:
    """
    The span to ingest with so totals line up with the rendered pattern.

    Single-day listings use the span unchanged. A single-day span forced
    into week view widens to its full Monday-Sunday week. A longer span is
    clipped to the week the pattern shows.
    """
    if display_kind(span, force_week_view) == DisplayKind.SINGLE_DAY:
        return span

    monday = week_start(span)
    sunday = monday + timedelta(days=min(6, (date.max - monday).days))

    if span.is_single_day:
        first, last = monday, sunday
    else:
        first = max(monday, span.start_date)
        last = min(sunday, span.end_date)

    return TimeSpan(
        kind=SpanKind.MULTI_DAY,
        reference_now=span.reference_now,
        start=start_of_day(first),
        end=end_of_day(last),
        description=f"week beginning {format_long_day(monday)}",
    )


def timeline_title(span: TimeSpan, force_week_view: bool = False) -> str:
    """Heading for the rendered timeline."""
    if display_kind(span, force_week_view) == DisplayKind.SINGLE_DAY:
        return span.description
    return f"Week beginning {format_long_day(week_start(span))}"


def week_counts(repo: RepositoryActivity, monday: date) -> List[int]:
    """Commits per weekday for the week opening on monday."""
    counts = [0] * 7
    for commit in repo.commits:
        offset = (commit.author_instant.date() - monday).days
        if 0 <= offset < 7:
            counts[offset] += 1
    return counts


def render(
    activities: List[RepositoryActivity],
    span: TimeSpan,
    force_week_view: bool = False,
    known_repositories: Optional[Iterable[str]] = None
) -> List[TimelineItem]:
    """
    Build timeline items for each repository.

    Args:
        activities: Output of ingest()
        span: The resolved span
        force_week_view: Always produce week patterns
        known_repositories: Extra repository names to list with zero
            commits (and an all-empty pattern in week view)

    Returns:
        TimelineItem list in the order of activities, then the extras
    """
    kind = display_kind(span, force_week_view)
    rows = list(activities)
    if known_repositories:
        seen = {repo.repository_name for repo in rows}
        for name in known_repositories:
            if name not in seen:
                seen.add(name)
                rows.append(RepositoryActivity(name))

    if kind == DisplayKind.SINGLE_DAY:
        return [
            TimelineItem(repo.repository_name, repo.commit_count, kind)
            for repo in rows
        ]

    monday = week_start(span)
    return [
        TimelineItem(
            repo.repository_name,
            repo.commit_count,
            kind,
            pattern=WeekPattern.from_counts(week_counts(repo, monday)),
        )
        for repo in rows
    ]
