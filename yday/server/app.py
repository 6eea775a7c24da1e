"""
FastAPI application factory for the yday JSON API.

Creates the app with all routes and a global error handler. There is no
database or background work: every request collects fresh commit text.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from yday import __version__
from yday.config.loader import load_config, get_parent_dir
from yday.sources.gitlog import make_collector

logger = logging.getLogger("yday.server")


def create_app(
    config: dict = None,
    parent_dir: Optional[Path] = None,
    collector=None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Configuration dict (loaded from disk if omitted)
        parent_dir: Repository parent directory (from config if omitted)
        collector: Callable (window) -> raw log text; defaults to git
    """
    app = FastAPI(
        title="yday API",
        description="Recent git activity across repositories",
        version=__version__,
    )

    config = config or load_config()
    parent_dir = parent_dir or get_parent_dir(config)

    app.state.config = config
    app.state.parent_dir = parent_dir
    app.state.collector = collector or make_collector(parent_dir, config)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "detail": str(exc)},
        )

    from yday.server.routes.health import router as health_router
    from yday.server.routes.timeline import router as timeline_router

    app.include_router(health_router)
    app.include_router(timeline_router)

    logger.info("yday API serving repositories under %s", parent_dir)
    return app
