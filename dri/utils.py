"""Logging and formatting utilities for dri."""

from __future__ import annotations

import os
import sys

from dri.constants import get_dri_debug


# Color codes - respect TERM environment variable
def _should_use_colors() -> bool:
    """Check if colors should be used based on TERM environment variable."""
    term = os.environ.get("TERM", "")
    if not term or term == "dumb":
        return False
    return sys.stdout.isatty()


_USE_COLORS = _should_use_colors()

BOLD = "\033[1m" if _USE_COLORS else ""
RESET = "\033[0m" if _USE_COLORS else ""


def log_info(msg: str) -> None:
    """Log an info message to stdout.

    Args:
        msg: The message to log.
    """
    print(msg)


def log_debug(msg: str) -> None:
    """Log a debug message (only if DRI_DEBUG=1).

    Args:
        msg: The message to log.
    """
    if get_dri_debug() == 1:
        print(f"DEBUG: {msg}", file=sys.stderr)


def log_warn(msg: str) -> None:
    """Log a warning message to stderr.

    Args:
        msg: The message to log.
    """
    print(f"Warning: {msg}", file=sys.stderr)


def log_error(msg: str) -> None:
    """Log an error message to stderr.

    Args:
        msg: The message to log.
    """
    print(f"Error: {msg}", file=sys.stderr)


# Formatting helper functions (pure functions, not logging)


def format_size(size: int) -> str:
    """Format a byte count in MiB with one decimal place."""
    return f"{size / 1048576:.1f} MiB"


def format_table_row(kind: str, name: str, *cols: str, name_width: int = 20) -> str:
    """Format a table row with fixed column widths.

    Args:
        kind: The single-letter entity type column.
        name: The name column.
        *cols: Additional columns to display.
        name_width: Width of the name column (default 20 chars).

    Returns:
        Formatted table row string.
    """
    row = f"{kind:<6} {name:<{name_width}}"
    for col in cols:
        row += f" {col:<12}"
    return row.rstrip()
