"""Sources package - repository discovery and git log collection."""

from .repositories import SourceError, find_repositories, is_git_repository
from .gitlog import collect_standup_text, make_collector, run_git

__all__ = [
    "SourceError",
    "find_repositories",
    "is_git_repository",
    "collect_standup_text",
    "make_collector",
    "run_git",
]
