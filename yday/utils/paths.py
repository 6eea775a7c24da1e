"""
Path utilities for yday.

Repository names come from the last path segment of a header line;
parent directories are shown with the home directory abbreviated.
"""

from pathlib import Path
from typing import Union


def repository_name(path_line: str) -> str:
    """
    Extract the repository name from a header path.

    "/Users/me/workspace/api/" -> "api"
    """
    stripped = path_line.strip().rstrip('/\\')
    if not stripped:
        return path_line.strip()
    return stripped.replace('\\', '/').rsplit('/', 1)[-1] or stripped


def expand_path(path: Union[str, Path]) -> Path:
    """Expand ~ in a configured or user-supplied path."""
    return Path(path).expanduser()


def display_path(path: Union[str, Path]) -> str:
    """Show a path with the home directory abbreviated to ~."""
    text = str(path)
    home = str(Path.home())
    if home and home != '/' and text.startswith(home):
        return '~' + text[len(home):]
    return text
