"""Pydantic models for the timeline, summary and repository APIs."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel

from yday.models.entities import RepositorySummary, TimelineItem, TimelineReport, TimeSpan


class TimeSpanModel(BaseModel):
    kind: str
    reference_now: datetime
    start: datetime
    end: datetime
    start_date: date
    end_date: date
    description: str

    @classmethod
    def from_span(cls, span: TimeSpan) -> "TimeSpanModel":
        return cls(
            kind=span.kind.value,
            reference_now=span.reference_now,
            start=span.start,
            end=span.end,
            start_date=span.start_date,
            end_date=span.end_date,
            description=span.description,
        )


class TimelineItemModel(BaseModel):
    repository: str
    total_commits: int
    display_kind: str
    pattern: Optional[str] = None  # MTWRFSs, None for single-day listings
    saturated: bool = False

    @classmethod
    def from_item(cls, item: TimelineItem) -> "TimelineItemModel":
        return cls(
            repository=item.repository_name,
            total_commits=item.total_commits,
            display_kind=item.display_kind.value,
            pattern=str(item.pattern) if item.pattern is not None else None,
            saturated=item.pattern.is_saturated if item.pattern is not None else False,
        )


class ValidationModel(BaseModel):
    is_valid: bool
    errors: List[str]


class TimelineResponse(BaseModel):
    span: TimeSpanModel
    window: TimeSpanModel
    display_kind: str
    title: str
    items: List[TimelineItemModel]
    validation: ValidationModel

    @classmethod
    def from_report(cls, report: TimelineReport) -> "TimelineResponse":
        return cls(
            span=TimeSpanModel.from_span(report.span),
            window=TimeSpanModel.from_span(report.window),
            display_kind=report.display_kind.value,
            title=report.title,
            items=[TimelineItemModel.from_item(item) for item in report.items],
            validation=ValidationModel(
                is_valid=report.validation.is_valid,
                errors=list(report.validation.errors),
            ),
        )


class RepositorySummaryModel(BaseModel):
    repository: str
    commits: int
    summary: str

    @classmethod
    def from_summary(cls, summary: RepositorySummary) -> "RepositorySummaryModel":
        return cls(
            repository=summary.repository_name,
            commits=summary.commit_count,
            summary=summary.summary,
        )


class SummaryResponse(BaseModel):
    span: TimeSpanModel
    repositories: List[RepositorySummaryModel]


class RepositoriesResponse(BaseModel):
    parent: str
    repositories: List[str]


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None
