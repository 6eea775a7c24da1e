"""Test fixtures for server tests.

Builds the app around a fixed clock and a canned log collector so every
endpoint answers deterministically without touching git.
"""

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from yday.config.loader import DEFAULT_CONFIG
from yday.server.app import create_app
from yday.server.dependencies import get_now
from yday.sources import SourceError

# Sunday
FIXED_NOW = datetime(2025, 8, 3, 12, 0, tzinfo=timezone.utc)

STANDUP_TEXT = """\
/home/test/workspace/api
a1b2c3d - feat: add login endpoint (2025-07-28T10:00:00+00:00) <Jane Doe>
b2c3d4e - fix: token refresh for auth (2025-07-28T22:30:00+00:00) <Jane Doe>
c3d4e5f - Update readme (2025-07-30T09:15:00Z) <John Roe>
/home/test/workspace/web
d4e5f6a - Polish ui components (2025-08-02T12:00:00Z) <Jane Doe>
"""


class FakeCollector:
    """Returns canned text and remembers the windows it was asked for."""

    def __init__(self, text: str = STANDUP_TEXT, error: Exception = None):
        self.text = text
        self.error = error
        self.windows = []

    def __call__(self, window):
        self.windows.append(window)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def collector():
    return FakeCollector()


@pytest.fixture
def parent_dir(tmp_path):
    """A parent directory holding two repositories and a plain folder."""
    (tmp_path / "api" / ".git").mkdir(parents=True)
    (tmp_path / "web" / ".git").mkdir(parents=True)
    (tmp_path / "scratch").mkdir()
    return tmp_path


def _build_app(config, parent_dir, collector):
    app = create_app(config=config, parent_dir=parent_dir, collector=collector)
    app.dependency_overrides[get_now] = lambda: FIXED_NOW
    return app


@pytest_asyncio.fixture
async def client(parent_dir, collector):
    """Create an async test client backed by the fake collector."""
    app = _build_app(dict(DEFAULT_CONFIG), parent_dir, collector)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def failing_client(tmp_path):
    """Client whose collector cannot reach git at all."""
    collector = FakeCollector(error=SourceError("git not found"))
    app = _build_app(dict(DEFAULT_CONFIG), tmp_path / "missing", collector)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
