"""
Timestamp links inserted into notes.
"""

from __future__ import annotations

from mxmedia.models.media_url import MediaURL
from mxmedia.parsing.temporal import TempFragment
from mxmedia.utils.formatting import format_duration


def timestamp_link(
    url: MediaURL,
    seconds: float,
    *,
    offset: float = 0.0,
    duration: float = float("inf"),
) -> str:
    """Markdown link that reopens ``url`` at ``seconds``.

    Args:
        url: Media being played
        seconds: Current player time
        offset: Added to ``seconds`` before clamping (may be negative)
        duration: Media duration; the time is clamped to [0, duration]

    Returns:
        ``[1:02:05](https://...#t=3725)``; at time 0 the link has no
        temporal fragment
    """
    time = min(max(seconds + offset, 0.0), duration)
    label = format_duration(time)
    frag = TempFragment(start=time) if time > 0 else None
    return f"[{label}]({url.set_temp_frag(frag).href})"
