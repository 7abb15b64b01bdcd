"""
Text formatting utilities.
"""

from __future__ import annotations


def format_duration(seconds: float | None) -> str | None:
    """Format seconds as human-readable duration string.

    Fractions of a second are dropped and negative values clamp to zero.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string (e.g., "1:05" or "1:02:05"), or None
    """
    if seconds is None:
        return None

    seconds = max(int(seconds), 0)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_seconds(seconds: float) -> str:
    """Format seconds for a URL: integers without a decimal point.

    Args:
        seconds: Time in seconds

    Returns:
        "30" for 30.0, else the shortest text that parses back to the
        same float ("1.5", "1.23456")
    """
    seconds = float(seconds)
    if seconds.is_integer():
        return str(int(seconds))
    return repr(seconds)
