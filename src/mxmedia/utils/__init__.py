"""
Utility functions for mxmedia.
"""

from mxmedia.utils.formatting import format_duration, format_seconds

__all__ = [
    "format_duration",
    "format_seconds",
]
