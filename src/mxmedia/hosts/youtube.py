"""YouTube watch, short-link, embed, shorts and live URLs."""

from __future__ import annotations

import re
from urllib.parse import SplitResult, parse_qs

from mxmedia.hosts.base import (
    HostHandler,
    MediaHost,
    ResolveResult,
    is_web_url,
    start_fragment,
)
from mxmedia.parsing.params import extract_start_time

YOUTUBE_HOSTS = frozenset(
    {
        "youtube.com",
        "www.youtube.com",
        "m.youtube.com",
        "music.youtube.com",
        "youtube-nocookie.com",
        "www.youtube-nocookie.com",
    }
)
YOUTUBE_SHORT_HOST = "youtu.be"

# YouTube video ID: 11 chars, alphanumeric + underscore + hyphen
YOUTUBE_VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")

_PATH_ID_RE = re.compile(r"^/(?:embed|shorts|live|v)/([A-Za-z0-9_-]{11})(?:/|$)")


def extract_youtube_id(url: SplitResult) -> str | None:
    """Extract the 11-character video id, or None."""
    if not is_web_url(url):
        return None
    host = url.hostname or ""

    if host == YOUTUBE_SHORT_HOST:
        # youtu.be/VIDEO_ID
        candidate = url.path.strip("/").split("/")[0]
        return candidate if YOUTUBE_VIDEO_ID_RE.match(candidate) else None

    if host not in YOUTUBE_HOSTS:
        return None

    # youtube.com/watch?v=VIDEO_ID
    if url.path.rstrip("/") == "/watch":
        values = parse_qs(url.query).get("v")
        if values and YOUTUBE_VIDEO_ID_RE.match(values[0]):
            return values[0]
        return None

    # youtube.com/embed/VIDEO_ID and friends
    match = _PATH_ID_RE.match(url.path)
    return match.group(1) if match else None


class YouTubeHandler(HostHandler):
    host = MediaHost.YOUTUBE

    def detect(self, url: SplitResult) -> bool:
        return extract_youtube_id(url) is not None

    def resolve(self, url: SplitResult) -> ResolveResult | None:
        video_id = extract_youtube_id(url)
        if video_id is None:
            return None

        cleaned = f"https://www.youtube.com/watch?v={video_id}"
        fragment = start_fragment(extract_start_time(url.query, "youtube"))
        if fragment:
            cleaned += "#" + fragment

        return ResolveResult(
            source=f"https://www.youtube.com/embed/{video_id}",
            cleaned=cleaned,
            id=video_id,
        )
