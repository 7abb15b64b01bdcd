"""
Media type inference from file extensions.
"""

from __future__ import annotations

from enum import Enum


class MediaType(str, Enum):
    """Kind of media a file or URL points to."""

    VIDEO = "video"
    AUDIO = "audio"


# Extensions (lowercase, without dot) the player can open
SUPPORTED_VIDEO_EXTENSIONS = frozenset({"mp4", "webm", "ogv", "mov", "mkv", "m4v"})
SUPPORTED_AUDIO_EXTENSIONS = frozenset(
    {"mp3", "wav", "m4a", "3gp", "flac", "ogg", "oga", "opus", "aac"}
)


def check_media_type(extension: str | None) -> MediaType | None:
    """Map a file extension to its media type.

    Args:
        extension: Extension with or without the leading dot, any case

    Returns:
        MediaType, or None if the extension is not a media extension
    """
    if not extension:
        return None
    ext = extension.lower().lstrip(".")
    if ext in SUPPORTED_VIDEO_EXTENSIONS:
        return MediaType.VIDEO
    if ext in SUPPORTED_AUDIO_EXTENSIONS:
        return MediaType.AUDIO
    return None


def infer_media_type(pathname: str) -> MediaType | None:
    """Infer the media type from the last segment of a URL path."""
    last = pathname.rsplit("/", 1)[-1]
    if "." not in last:
        return None
    return check_media_type(last.rsplit(".", 1)[-1])
