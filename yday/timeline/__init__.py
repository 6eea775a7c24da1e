"""
Timeline package - the four-step commit activity pipeline.

Main entry point is run_pipeline() which resolves a directive, collects
log text, and returns a validated TimelineReport.
"""

from .timespan import resolve, parse_directive
from .ingest import ingest
from .pattern import render, ingestion_window, week_start
from .validator import validate
from .pipeline import build_timeline, run_pipeline

__all__ = [
    "resolve",
    "parse_directive",
    "ingest",
    "render",
    "ingestion_window",
    "week_start",
    "validate",
    "build_timeline",
    "run_pipeline",
]
