"""
Output formatting for yday.

Handles markdown tables, colors, and CLI output formatting.
All stdlib - no external dependencies.
"""

import os
import re
import sys
from typing import Any, List

# Enable ANSI colors on Windows
if sys.platform == 'win32':
    os.system('')  # Triggers VT100 emulation

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'

    # Foreground colors
    RED = '\033[91m'
    GREEN = '\033[92m'


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """Apply color if enabled."""
    if not enabled:
        return text
    return f"{color}{text}{Colors.RESET}"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_ESCAPE.sub('', text)


def format_count(value: int) -> str:
    """Format a commit count with thousands separator."""
    return f"{int(value):,}"


def format_markdown_table(headers: List[str], rows: List[List[Any]]) -> str:
    """
    Format data as a left-aligned markdown table.

    Columns are padded to the widest cell (ANSI codes ignored), e.g.:

        | Repo | Commits |
        |------|---------|
        | api  | 3       |
    """
    str_rows = [[str(cell) for cell in row] for row in rows]

    col_widths = [len(h) for h in headers]
    for row in str_rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(strip_ansi(cell)))

    def pad(text: str, width: int) -> str:
        return text + ' ' * (width - len(strip_ansi(text)))

    lines = ['| ' + ' | '.join(pad(h, col_widths[i]) for i, h in enumerate(headers)) + ' |']
    lines.append('|' + '|'.join('-' * (w + 2) for w in col_widths) + '|')
    for row in str_rows:
        lines.append('| ' + ' | '.join(pad(cell, col_widths[i]) for i, cell in enumerate(row)) + ' |')

    return '\n'.join(lines)
