"""
Media host detection and resolution.

``HOST_HANDLERS`` is ordered: the first handler whose detector accepts a
URL owns it. URLs no handler claims fall back to ``GENERIC_HANDLER``.
"""

from __future__ import annotations

import logging
from urllib.parse import SplitResult

from mxmedia.hosts.base import HostHandler, MediaHost, ResolveResult, is_web_url
from mxmedia.hosts.bilibili import BilibiliHandler
from mxmedia.hosts.coursera import CourseraHandler
from mxmedia.hosts.generic import GenericHandler
from mxmedia.hosts.vimeo import VimeoHandler
from mxmedia.hosts.youtube import YouTubeHandler
from mxmedia.urls import parse_url

logger = logging.getLogger(__name__)

HOST_HANDLERS: tuple[HostHandler, ...] = (
    BilibiliHandler(),
    YouTubeHandler(),
    VimeoHandler(),
    CourseraHandler(),
)
GENERIC_HANDLER = GenericHandler()

_HANDLERS_BY_HOST: dict[MediaHost, HostHandler] = {
    handler.host: handler for handler in (*HOST_HANDLERS, GENERIC_HANDLER)
}


def get_handler(host: MediaHost) -> HostHandler:
    """Return the handler registered for a host kind."""
    return _HANDLERS_BY_HOST[host]


def detect_host(url: SplitResult) -> MediaHost:
    """Classify a normalized URL: first accepting detector wins."""
    for handler in HOST_HANDLERS:
        if handler.detect(url):
            return handler.host
    return MediaHost.GENERIC


def resolve_url(url: str | SplitResult) -> ResolveResult:
    """Resolve a URL by trying every host resolver in order.

    Unlike classification, this skips the detectors: the first resolver
    that returns a result wins. Non-web URLs always resolve generically.

    Raises:
        InvalidURLError: If ``url`` is a string that is not a URL
        UnsupportedProtocolError: If ``url`` is a string with a scheme
            other than http, https or file
    """
    if isinstance(url, str):
        url = parse_url(url)
    if not is_web_url(url):
        return GENERIC_HANDLER.resolve(url)
    for handler in HOST_HANDLERS:
        result = handler.resolve(url)
        if result is not None:
            logger.debug(f"Resolved {url.geturl()} with {handler!r}")
            return result
    return GENERIC_HANDLER.resolve(url)


def list_supported_hosts() -> list[str]:
    """List platform hosts in detection order."""
    return [handler.host.value for handler in HOST_HANDLERS]


__all__ = [
    "GENERIC_HANDLER",
    "HOST_HANDLERS",
    "HostHandler",
    "MediaHost",
    "ResolveResult",
    "detect_host",
    "get_handler",
    "list_supported_hosts",
    "resolve_url",
]
