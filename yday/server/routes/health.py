"""Health check endpoint."""

import time
from fastapi import APIRouter

from yday import __version__

router = APIRouter(prefix="/api", tags=["health"])

_start_time = time.time()


@router.get("/health")
def health_check():
    """Health check: returns status, uptime and version."""
    return {
        "status": "ok",
        "uptime_seconds": int(time.time() - _start_time),
        "version": __version__,
    }
