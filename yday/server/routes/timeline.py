"""Timeline, summary and repository endpoints.

Handlers are plain ``def`` so git subprocesses run in FastAPI's threadpool.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from yday.analysis.semantic import summarize
from yday.models.entities import TimeDirective
from yday.server.dependencies import get_collector, get_now, get_parent_dir
from yday.server.models.timeline import (
    ErrorResponse,
    RepositoriesResponse,
    RepositorySummaryModel,
    SummaryResponse,
    TimelineResponse,
    TimeSpanModel,
)
from yday.sources import SourceError, find_repositories
from yday.timeline.ingest import ingest
from yday.timeline.pipeline import run_pipeline
from yday.timeline.timespan import parse_directive, resolve
from yday.utils.paths import display_path

router = APIRouter(
    prefix="/api",
    tags=["timeline"],
    responses={502: {"model": ErrorResponse, "description": "Commit source unavailable"}},
)


def _directive(
    when: Optional[str],
    after: Optional[date],
    before: Optional[date]
) -> Optional[TimeDirective]:
    if when:
        return parse_directive(when)
    if after or before:
        return TimeDirective.date_range(after, before)
    return None


def _source_error(exc: SourceError) -> JSONResponse:
    return JSONResponse(
        status_code=502,
        content=ErrorResponse(error="Commit source unavailable", detail=str(exc)).model_dump(),
    )


@router.get("/timeline", response_model=TimelineResponse)
def timeline(
    when: Optional[str] = Query(None, description='e.g. "yesterday", "last tuesday", "last 7 days"'),
    after: Optional[date] = Query(None),
    before: Optional[date] = Query(None),
    week: bool = Query(False, description="Always render a week pattern"),
    collect=Depends(get_collector),
    now: datetime = Depends(get_now),
):
    """Run the timeline pipeline and return items with their validation."""
    try:
        report = run_pipeline(_directive(when, after, before), now, collect, force_week_view=week)
    except SourceError as e:
        return _source_error(e)
    return TimelineResponse.from_report(report)


@router.get("/summary", response_model=SummaryResponse)
def summary(
    when: Optional[str] = Query(None),
    after: Optional[date] = Query(None),
    before: Optional[date] = Query(None),
    collect=Depends(get_collector),
    now: datetime = Depends(get_now),
):
    """Per-repository commit counts with heuristic summaries."""
    span = resolve(_directive(when, after, before), now)
    try:
        activities = ingest(collect(span), span)
    except SourceError as e:
        return _source_error(e)
    return SummaryResponse(
        span=TimeSpanModel.from_span(span),
        repositories=[RepositorySummaryModel.from_summary(s) for s in summarize(activities)],
    )


@router.get("/repositories", response_model=RepositoriesResponse)
def repositories(parent_dir: Path = Depends(get_parent_dir)):
    """Git repositories under the configured parent directory."""
    try:
        repos = find_repositories(parent_dir)
    except SourceError as e:
        return _source_error(e)
    return RepositoriesResponse(
        parent=display_path(parent_dir),
        repositories=[repo.name for repo in repos],
    )
