"""
Repository discovery for yday.

A repository is any immediate subdirectory of the parent directory that
holds a .git directory (or a .git file, for worktrees).
"""

from pathlib import Path
from typing import List


class SourceError(RuntimeError):
    """Raised when commit text cannot be collected at all."""


def is_git_repository(path: Path) -> bool:
    """Check for a .git directory or worktree file."""
    git_path = path / '.git'
    return git_path.is_dir() or git_path.is_file()


def find_repositories(parent_dir: Path) -> List[Path]:
    """
    Find git repositories directly under parent_dir.

    Args:
        parent_dir: Directory to scan (not recursive)

    Returns:
        Repository paths sorted by name

    Raises:
        SourceError: If parent_dir does not exist or cannot be read
    """
    if not parent_dir.is_dir():
        raise SourceError(f"Parent directory not found: {parent_dir}")

    try:
        entries = list(parent_dir.iterdir())
    except OSError as e:
        raise SourceError(f"Failed to scan directory {parent_dir}: {e}") from e

    repos = [entry for entry in entries if entry.is_dir() and is_git_repository(entry)]
    return sorted(repos, key=lambda p: p.name.lower())
