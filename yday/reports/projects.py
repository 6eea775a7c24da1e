"""Project list report for yday (--projects)."""

from pathlib import Path
from typing import List


def generate_projects_list(repositories: List[Path]) -> str:
    """One markdown bullet per repository name."""
    if not repositories:
        return "No git repositories found."
    return '\n'.join(f"- {repo.name}" for repo in repositories)
