"""Analysis package - heuristic commit message summaries."""

from .semantic import generate_summary, summarize

__all__ = ["generate_summary", "summarize"]
