"""Models package - dataclass entities shared by the pipeline, reports and server."""

from .entities import (
    CommitRecord,
    DirectiveKind,
    DisplayKind,
    RepositoryActivity,
    RepositorySummary,
    SpanKind,
    TimeDirective,
    TimelineItem,
    TimelineReport,
    TimeSpan,
    ValidationResult,
    WeekPattern,
)

__all__ = [
    "CommitRecord",
    "DirectiveKind",
    "DisplayKind",
    "RepositoryActivity",
    "RepositorySummary",
    "SpanKind",
    "TimeDirective",
    "TimelineItem",
    "TimelineReport",
    "TimeSpan",
    "ValidationResult",
    "WeekPattern",
]
