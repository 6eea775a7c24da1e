"""
Commit text collection for yday.

Runs ``git log`` in every repository under the parent directory and
stitches the results into the header/commit-line text the timeline
ingestion step reads:

    /home/me/workspace/api
    a1b2c3d - Add login endpoint (2025-07-28T10:00:00-04:00) <Jane Doe>
"""

import subprocess
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from yday.models.entities import TimeSpan
from yday.sources.repositories import SourceError, find_repositories
from yday.utils.progress import print_verbose

LOG_FORMAT = '%h - %s (%ad) <%an>'

# git filters --since/--until on committer date while ingestion buckets on
# author date. Pad the query so rebased or amended commits still reach the
# exact UTC day filter in ingestion.
DEFAULT_QUERY_PADDING_DAYS = 7


def run_git(
    args: List[str],
    cwd: Path,
    timeout: int = 30,
    command: str = 'git'
) -> Tuple[bool, str]:
    """
    Run a git command and return (success, stdout).

    Raises:
        SourceError: If the git executable cannot be found
    """
    try:
        result = subprocess.run(
            [command] + args,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding='utf-8',
            errors='replace',
        )
    except FileNotFoundError as e:
        raise SourceError(f"{command} not found. Install git or set git.command in the config.") from e
    except (subprocess.TimeoutExpired, OSError) as exc:
        return False, str(exc)
    if result.returncode != 0:
        return False, result.stderr.strip()
    return True, result.stdout.strip()


def _shift(instant: datetime, days: int) -> datetime:
    try:
        return instant + timedelta(days=days)
    except OverflowError:
        return instant


def build_log_args(
    window: TimeSpan,
    author: Optional[str] = None,
    padding_days: int = DEFAULT_QUERY_PADDING_DAYS
) -> List[str]:
    """git log arguments covering the window, padded by padding_days each side."""
    since = _shift(window.start, -padding_days).strftime('%Y-%m-%dT%H:%M:%SZ')
    until = _shift(window.end, padding_days).strftime('%Y-%m-%dT%H:%M:%SZ')
    args = [
        'log',
        '--all',
        '--no-merges',
        f'--since={since}',
        f'--until={until}',
        f'--format={LOG_FORMAT}',
        '--date=iso-strict',
    ]
    if author:
        args.append(f'--author={author}')
    return args


def collect_standup_text(
    parent_dir: Path,
    window: TimeSpan,
    config: Dict[str, Any],
    verbose: bool = False
) -> str:
    """
    Collect commit lines for every repository under parent_dir.

    Args:
        parent_dir: Directory holding the repositories
        window: Span to query (ingestion filters exactly afterwards)
        config: Configuration dict (uses the "git" section)
        verbose: Print the commands being run

    Returns:
        Raw text with one path header per repository that has commits

    Raises:
        SourceError: If parent_dir is missing or git is not installed
    """
    git_config = config.get('git', {})
    command = git_config.get('command') or 'git'
    timeout = git_config.get('timeout_seconds') or 30
    padding = git_config.get('query_padding_days')
    if padding is None:
        padding = DEFAULT_QUERY_PADDING_DAYS
    args = build_log_args(window, git_config.get('author'), padding)

    blocks = []
    for repo in find_repositories(parent_dir):
        print_verbose(f"Running: {command} {' '.join(args)} (in {repo})", verbose)
        ok, output = run_git(args, repo, timeout=timeout, command=command)
        if not ok:
            print_verbose(f"Skipping {repo.name}: {output}", verbose)
            continue
        if output:
            blocks.append(f"{repo}\n{output}")

    return '\n'.join(blocks)


def make_collector(
    parent_dir: Path,
    config: Dict[str, Any],
    verbose: bool = False
):
    """Bind collect_standup_text to a parent directory for run_pipeline()."""
    def collect(window: TimeSpan) -> str:
        return collect_standup_text(parent_dir, window, config, verbose)
    return collect
