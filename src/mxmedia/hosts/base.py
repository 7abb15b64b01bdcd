"""
mxmedia.hosts.base - Contract shared by all media host handlers.

A handler pairs a detector with a resolver for one media host:

- ``detect(url)`` is a cheap hostname/path check with no side effects.
- ``resolve(url)`` computes the canonical form and the host-native id.
  It returns None for URLs it does not understand, and must never return
  None for a URL its own ``detect`` accepted.

Both receive a URL already normalized by ``mxmedia.urls.parse_url``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from mxmedia.parsing.temporal import TempFragment, encode_temp_frag

if TYPE_CHECKING:
    from urllib.parse import SplitResult


class MediaHost(str, Enum):
    """Platform a media URL belongs to."""

    GENERIC = "generic"
    YOUTUBE = "youtube"
    VIMEO = "vimeo"
    BILIBILI = "bilibili"
    COURSERA = "coursera"


@dataclass(frozen=True)
class ResolveResult:
    """Output of a host resolver.

    Attributes:
        source: URL handed to the player (page or embed URL)
        cleaned: Canonical URL without session or tracking parameters;
            may carry a temporal fragment taken from the query string
        id: Platform-native identifier, None for generic URLs
    """

    source: str
    cleaned: str
    id: str | None = None


class HostHandler(ABC):
    """Detector and resolver for one media host."""

    host: ClassVar[MediaHost]

    @abstractmethod
    def detect(self, url: SplitResult) -> bool:
        """Return True if this handler owns the URL."""
        ...

    @abstractmethod
    def resolve(self, url: SplitResult) -> ResolveResult | None:
        """Resolve the URL, or return None if it is not a URL of this host."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host={self.host.value!r})"


def is_web_url(url: SplitResult) -> bool:
    return url.scheme in ("http", "https")


def start_fragment(start: float | None) -> str:
    """Fragment string for a start time taken from a query parameter."""
    if not start:
        return ""
    return encode_temp_frag(TempFragment(start=start))
