"""
Timeline report for yday.

Renders a TimelineReport as markdown: a flat Repo/Commits list for
single-day spans, or an MTWRFSs week pattern table otherwise.
"""

from typing import List

from yday.models.entities import (
    DisplayKind, EMPTY_MARKER, OVERFLOW_MARKER, TimelineReport, WeekPattern,
)
from yday.output.formatter import format_count, format_markdown_table

WEEK_HEADER = 'MTWRFSs'
HIGH_ACTIVITY = 3


def to_activity_symbols(pattern: WeekPattern) -> str:
    """
    Coarse view of a pattern: x for busy days, / for light ones.

    Busy means HIGH_ACTIVITY commits or more (including overflow).
    """
    out = []
    for symbol in pattern.symbols:
        if symbol == EMPTY_MARKER:
            out.append(EMPTY_MARKER)
        elif symbol == OVERFLOW_MARKER or int(symbol) >= HIGH_ACTIVITY:
            out.append('x')
        else:
            out.append('/')
    return ''.join(out)


def legend_lines(symbols: bool = False) -> List[str]:
    lines = ['Legend:']
    if symbols:
        lines.append(f'  x = High activity day ({HIGH_ACTIVITY}+ commits)')
        lines.append(f'  / = Some activity day (1-{HIGH_ACTIVITY - 1} commits)')
    else:
        lines.append('  1-9 = Number of commits that day')
        lines.append(f'  {OVERFLOW_MARKER} = 10 or more commits')
    lines.append(f'  {EMPTY_MARKER} = No activity')
    lines.append('  M T W R F S s = Mon Tue Wed Thu Fri Sat Sun')
    return lines


def generate_timeline_report(
    report: TimelineReport,
    parent_display: str,
    details: bool = False,
    symbols: bool = False
) -> str:
    """
    Generate the timeline view.

    Args:
        report: Output of run_pipeline()
        parent_display: Parent directory as it should be shown
        details: Append a legend under week patterns
        symbols: Show x and / instead of digits
    """
    title = report.title
    if title != report.span.description:
        title = f"{title} ({report.span.description})"

    lines = [f"### Timeline in `{parent_display}` for {title}", ""]

    if report.display_kind == DisplayKind.SINGLE_DAY:
        if not report.items:
            lines.append(format_markdown_table(['Repo', 'Commits'], [['-', 'No commits found']]))
            return '\n'.join(lines)

        rows = [[item.repository_name, format_count(item.total_commits)] for item in report.items]
        lines.append(format_markdown_table(['Repo', 'Commits'], rows))
        return '\n'.join(lines)

    headers = [WEEK_HEADER, 'Repo', 'Commits']
    if not report.items:
        lines.append(format_markdown_table(headers, [[EMPTY_MARKER * 7, '-', 'No commits found']]))
        return '\n'.join(lines)

    rows = []
    for item in report.items:
        pattern = to_activity_symbols(item.pattern) if symbols else str(item.pattern)
        rows.append([pattern, item.repository_name, format_count(item.total_commits)])
    lines.append(format_markdown_table(headers, rows))

    if details:
        lines.append("")
        lines.extend(legend_lines(symbols))

    return '\n'.join(lines)
