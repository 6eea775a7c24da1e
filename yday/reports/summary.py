"""
Summary report for yday.

The default view: one markdown row per repository with its commit count
and a heuristic summary of what the commits were about.
"""

from typing import List

from yday.models.entities import RepositorySummary, TimeSpan
from yday.output.formatter import format_count, format_markdown_table


def generate_summary_report(
    summaries: List[RepositorySummary],
    span: TimeSpan,
    parent_display: str
) -> str:
    """
    Generate the repository activity summary.

    Args:
        summaries: Output of analysis.semantic.summarize()
        span: The resolved span (for the heading)
        parent_display: Parent directory as it should be shown
    """
    lines = [f"### Git Repository Activity in `{parent_display}` ({span.description})...", ""]
    headers = ['Repo', 'Commits', 'Summary']

    if not summaries:
        rows = [['-', '-', f"No commits found for {span.description}"]]
    else:
        rows = [
            [s.repository_name, format_count(s.commit_count), s.summary]
            for s in summaries
        ]

    lines.append(format_markdown_table(headers, rows))
    return '\n'.join(lines)
