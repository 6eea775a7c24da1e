"""yday - recent git activity across many repositories."""

__version__ = "1.0.0"
