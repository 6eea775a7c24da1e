"""
Timeline pipeline for yday.

Runs the four steps in order: resolve -> ingest -> render -> validate.
The log collector is passed in as a callable so the pipeline itself does
no I/O of its own.
"""

from datetime import datetime
from typing import Callable, Iterable, Optional

from yday.models.entities import TimeDirective, TimelineReport, TimeSpan
from yday.timeline.ingest import ingest
from yday.timeline.pattern import display_kind, ingestion_window, render, timeline_title
from yday.timeline.timespan import resolve
from yday.timeline.validator import validate

Collector = Callable[[TimeSpan], str]


def build_timeline(
    raw_text: str,
    span: TimeSpan,
    force_week_view: bool = False,
    known_repositories: Optional[Iterable[str]] = None
) -> TimelineReport:
    """Steps 2-4 for an already resolved span and already collected text."""
    window = ingestion_window(span, force_week_view)
    activities = ingest(raw_text, window)
    items = render(activities, span, force_week_view, known_repositories)

    return TimelineReport(
        span=span,
        window=window,
        display_kind=display_kind(span, force_week_view),
        title=timeline_title(span, force_week_view),
        items=items,
        validation=validate(items),
    )


def run_pipeline(
    directive: Optional[TimeDirective],
    now: datetime,
    collect: Collector,
    force_week_view: bool = False
) -> TimelineReport:
    """
    Resolve the directive, collect log text for the window, build the timeline.

    Args:
        directive: Requested time intent (None for smart yesterday)
        now: Current instant
        collect: Called once with the ingestion window; returns raw log text
        force_week_view: Always render week patterns

    Returns:
        TimelineReport
    """
    span = resolve(directive, now)
    raw_text = collect(ingestion_window(span, force_week_view))
    return build_timeline(raw_text, span, force_week_view)
