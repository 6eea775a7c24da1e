"""FastAPI dependency injection for sources and the clock."""

from datetime import datetime, timezone
from pathlib import Path

from fastapi import Request


def get_parent_dir(request: Request) -> Path:
    """Get the repository parent directory from app state."""
    return request.app.state.parent_dir


def get_collector(request: Request):
    """
    Get the log collector factory from app state.

    Returns a callable (window) -> raw log text.
    """
    return request.app.state.collector


def get_now() -> datetime:
    """Current instant; overridden in tests."""
    return datetime.now(timezone.utc)
