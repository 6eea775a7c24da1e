"""
Commit ingestion for yday.

Step 2 of the timeline pipeline: parses line-oriented log text into
per-repository commit lists and keeps only commits whose UTC calendar
date falls inside the span.

Expected text shape:

    /home/me/workspace/api
    a1b2c3d - Add login endpoint (3 hours ago) <Jane Doe>
    e4f5a6b - Fix token refresh (2025-07-28T10:00:00-04:00) <Jane Doe>

Lines that do not fit are skipped without complaint.
"""

import re
from datetime import datetime
from typing import Dict, Iterator, List, Optional, Union

from yday.models.entities import CommitRecord, RepositoryActivity, TimeSpan
from yday.utils.paths import repository_name
from yday.utils.timestamps import parse_temporal_marker

COMMIT_LINE = re.compile(
    r'^(?P<hash>[0-9a-fA-F]{4,40})\s+-\s+(?P<message>.+?)\s+'
    r'\((?P<marker>[^()]+)\)\s+<(?P<author>[^>]*)>\s*$'
)
NO_COMMITS_LINE = re.compile(r'^No commits from .* during this period\.?$')
HEADER_DIRS = ('/workspace/', '/repos/')


def is_header_line(line: str) -> bool:
    """A repository header is a path: it starts with / or ~, or sits under a workspace or repos dir."""
    if line.startswith('/') or line.startswith('~'):
        return True
    return any(marker in line for marker in HEADER_DIRS)


def parse_commit_line(line: str, now: datetime) -> Optional[CommitRecord]:
    """
    Parse one commit line.

    Args:
        line: Stripped text line
        now: Instant that relative markers ("2 days ago") count back from

    Returns:
        CommitRecord, or None if the line is not a usable commit line
    """
    match = COMMIT_LINE.match(line)
    if not match:
        return None

    message = match.group('message').strip()
    if not message:
        return None

    author_instant = parse_temporal_marker(match.group('marker'), now)
    if author_instant is None:
        return None

    return CommitRecord(
        id=match.group('hash'),
        message=message,
        author=match.group('author').strip(),
        author_instant=author_instant,
    )


def parse_line(line: str, now: datetime) -> Union[str, CommitRecord, None]:
    """
    Classify one raw line.

    Returns the repository name for a header, a CommitRecord for a
    commit line, or None for anything else.
    """
    line = line.strip()
    if not line or NO_COMMITS_LINE.match(line):
        return None
    if COMMIT_LINE.match(line):
        return parse_commit_line(line, now)
    if is_header_line(line):
        return repository_name(line)
    return None


def parse_standup_output(raw_text: str, now: datetime) -> List[RepositoryActivity]:
    """
    Group parsed commits under their repository headers.

    Repositories keep first-appearance order; a repeated header appends
    to the earlier entry. Commits before the first header are dropped.
    """
    repos: Dict[str, RepositoryActivity] = {}
    current: Optional[RepositoryActivity] = None

    for parsed in _parsed_lines(raw_text, now):
        if isinstance(parsed, str):
            current = repos.setdefault(parsed, RepositoryActivity(parsed))
        elif current is not None:
            current.commits.append(parsed)

    return list(repos.values())


def _parsed_lines(raw_text: str, now: datetime) -> Iterator[Union[str, CommitRecord]]:
    for line in (raw_text or '').splitlines():
        parsed = parse_line(line, now)
        if parsed is not None:
            yield parsed


def is_commit_in_span(commit: CommitRecord, span: TimeSpan) -> bool:
    """Date-level inclusion test; time of day is ignored."""
    commit_day = commit.author_instant.date()
    return span.start_date <= commit_day <= span.end_date


def filter_to_span(
    repos: List[RepositoryActivity],
    span: TimeSpan
) -> List[RepositoryActivity]:
    """Restrict each repository to the span and drop the empty ones."""
    filtered = []
    for repo in repos:
        commits = [c for c in repo.commits if is_commit_in_span(c, span)]
        if commits:
            filtered.append(RepositoryActivity(repo.repository_name, commits))
    return filtered


def ingest(
    raw_text: str,
    span: TimeSpan,
    now: Optional[datetime] = None
) -> List[RepositoryActivity]:
    """
    Parse raw log text and keep only commits inside the span.

    Args:
        raw_text: Output of the log collector
        span: Resolved TimeSpan
        now: Anchor for relative markers; defaults to span.reference_now

    Returns:
        RepositoryActivity list, one entry per repository with commits
    """
    anchor = now if now is not None else span.reference_now
    return filter_to_span(parse_standup_output(raw_text, anchor), span)
