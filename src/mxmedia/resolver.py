"""
MediaResolver - settings-bound entry point used by the note application.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import PurePath

from mxmedia.config.defaults import DEFAULT_RESOURCE_PATH_PREFIX, DEFAULT_TIMESTAMP_OFFSET
from mxmedia.config.loader import MxSettings, get_config
from mxmedia.exceptions import InvalidURLError
from mxmedia.models.media_url import MediaURL
from mxmedia.protocol import from_file, resolve_mx_protocol
from mxmedia.switcher import get_suggestions
from mxmedia.timestamp import timestamp_link

logger = logging.getLogger(__name__)


class MediaResolver:
    """Resolves links, typed queries and files against one configuration.

    Args:
        settings: Alias mapping source; defaults to the resolved config
            file (see ``mxmedia.config.loader``)
    """

    def __init__(self, settings: MxSettings | None = None):
        self.settings = settings if settings is not None else get_config()

    def resolve(self, url: str | None) -> MediaURL | None:
        """Expand mx:// aliases, then parse. None if not a media URL."""
        try:
            remapped = resolve_mx_protocol(url, self.settings)
        except InvalidURLError as e:
            logger.debug(f"Cannot resolve {url!r}: {e}")
            return None
        return MediaURL.try_create(remapped)

    def suggest(self, query: str) -> list[MediaURL]:
        return get_suggestions(query, self.settings)

    def from_file(
        self,
        file: str | PurePath,
        get_resource_path: Callable[[str | PurePath], str] | None = None,
    ) -> MediaURL:
        prefix = getattr(self.settings, "resource_path_prefix", DEFAULT_RESOURCE_PATH_PREFIX)
        return from_file(file, get_resource_path, resource_path_prefix=prefix)

    def timestamp_link(
        self, url: MediaURL, seconds: float, duration: float = float("inf")
    ) -> str:
        offset = getattr(self.settings, "timestamp_offset", DEFAULT_TIMESTAMP_OFFSET)
        return timestamp_link(url, seconds, offset=offset, duration=duration)
