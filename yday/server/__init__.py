"""Server package - optional FastAPI JSON API (yday --serve)."""
