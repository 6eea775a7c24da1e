"""Utility helpers: timestamps, paths and status output."""
