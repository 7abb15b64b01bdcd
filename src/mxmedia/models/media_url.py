"""
MediaURL Pydantic model: the canonical identity of a media reference.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import SplitResult, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mxmedia.exceptions import InvalidURLError, MxMediaError
from mxmedia.hosts import MediaHost, detect_host, get_handler
from mxmedia.models.media_type import MediaType, infer_media_type
from mxmedia.parsing.params import remove_query_params, start_time_params
from mxmedia.parsing.temporal import (
    TempFragment,
    add_temp_frag,
    decode_temp_frag,
    remove_temp_frag,
)
from mxmedia.urls import no_hash, parse_url, with_hash

logger = logging.getLogger(__name__)


class MediaURL(BaseModel):
    """Parsed, classified and resolved media URL.

    Built from a string with ``MediaURL.create``; every derived field is
    computed once from ``href`` during validation, so an instance is
    always consistent with its URL. Instances are frozen: methods that
    change the URL return a new instance.

    Example:
        >>> url = MediaURL.create("https://youtu.be/dQw4w9WgXcQ?t=30")
        >>> url.type, url.id
        (<MediaHost.YOUTUBE: 'youtube'>, 'dQw4w9WgXcQ')
        >>> url.temp_frag
        TempFragment(start=30.0, end=-1)
    """

    model_config = ConfigDict(frozen=True)

    href: str = Field(..., description="Normalized URL")
    type: MediaHost = Field(MediaHost.GENERIC, description="Detected media host")
    source: str = Field("", description="URL handed to the player")
    cleaned: str = Field("", description="Canonical URL used for comparison")
    id: str | None = Field(None, description="Host-native media id")

    @model_validator(mode="before")
    @classmethod
    def resolve_host(cls, data: Any) -> dict[str, Any]:
        """Normalize href, then derive host, source, cleaned and id from it."""
        if isinstance(data, MediaURL):
            href = data.href
        elif isinstance(data, str):
            href = data
        elif isinstance(data, dict):
            href = data.get("href")
        else:
            raise InvalidURLError(repr(data))

        parts = parse_url(href)
        host = detect_host(parts)
        handler = get_handler(host)
        result = handler.resolve(parts)
        if result is None:
            raise RuntimeError(f"{handler!r} detected but failed to resolve {href!r}")

        logger.debug(f"Classified {href!r} as {host.value}")
        return {
            "href": urlunsplit(parts),
            "type": host,
            "source": result.source,
            "cleaned": result.cleaned,
            "id": result.id,
        }

    @classmethod
    def create(cls, url: str | MediaURL) -> MediaURL:
        """Parse a URL into a MediaURL.

        Args:
            url: Absolute http(s) or file URL

        Returns:
            MediaURL with host, canonical URL and id resolved

        Raises:
            InvalidURLError: If the input is not an absolute URL
            UnsupportedProtocolError: If the scheme is not http, https or file
        """
        return cls.model_validate(url)

    @classmethod
    def try_create(cls, url: str | MediaURL | None) -> MediaURL | None:
        """Like ``create``, but return None instead of raising."""
        if url is None:
            return None
        try:
            return cls.create(url)
        except MxMediaError as e:
            logger.debug(f"Not a media URL: {e}")
            return None

    @property
    def parts(self) -> SplitResult:
        return urlsplit(self.href)

    @property
    def protocol(self) -> str:
        """Scheme without the trailing colon ("https", "file")."""
        return self.parts.scheme

    @property
    def hostname(self) -> str:
        return self.parts.hostname or ""

    @property
    def pathname(self) -> str:
        return self.parts.path

    @property
    def search(self) -> str:
        """Query string without the leading "?"."""
        return self.parts.query

    @property
    def hash(self) -> str:
        """Fragment without the leading "#"."""
        return self.parts.fragment

    @property
    def is_file_url(self) -> bool:
        return self.protocol == "file"

    @property
    def inferred_type(self) -> MediaType | None:
        """Media type from the extension of the last path segment."""
        return infer_media_type(self.pathname)

    @property
    def temp_frag(self) -> TempFragment | None:
        """Playback window from the hash, else from the canonical URL.

        The canonical URL carries start times that the host encodes in
        the query string (e.g. YouTube's ``?t=30``).
        """
        return decode_temp_frag(self.hash) or decode_temp_frag(urlsplit(self.cleaned).fragment)

    def compare(self, other: MediaURL | None) -> bool:
        """True if both point to the same resource, ignoring the hash."""
        return other is not None and no_hash(self.cleaned) == no_hash(other.cleaned)

    def set_temp_frag(self, temp_frag: TempFragment | None) -> MediaURL:
        """Return a copy with the temporal fragment replaced or removed.

        Other hash content is kept as-is. Start times the host reads from
        the query string (YouTube's ``?t=30``) are dropped, so the new
        hash is the only temporal fragment left.
        """
        if temp_frag is not None:
            new_hash = add_temp_frag(self.hash, temp_frag)
        else:
            new_hash = remove_temp_frag(self.hash)
        query = remove_query_params(self.search, start_time_params(self.type.value))
        href = urlunsplit(self.parts._replace(query=query))
        return MediaURL.create(with_hash(href, new_hash))

    def clone(self) -> MediaURL:
        return MediaURL.create(self.href)

    def __str__(self) -> str:
        return self.href

    def __repr__(self) -> str:
        return f"MediaURL(href={self.href!r}, type={self.type.value!r}, id={self.id!r})"
