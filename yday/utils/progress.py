"""
Status output helpers for yday.

Plain print-based messaging for the CLI. No external dependencies.
"""

import sys

from yday.output.formatter import Colors, colorize


def print_status(message: str, end: str = '\n') -> None:
    """Print a status message."""
    print(message, end=end, flush=True)


def print_verbose(message: str, verbose: bool = False) -> None:
    """Print a message only if verbose mode is enabled."""
    if verbose:
        print(message, flush=True)


def print_warning(message: str) -> None:
    """Print a warning line."""
    print(f"Warning: {message}", flush=True)


def print_error(message: str, color_enabled: bool = True) -> None:
    """Print an error line to stderr."""
    print(colorize(f"Error: {message}", Colors.RED, color_enabled), file=sys.stderr, flush=True)
