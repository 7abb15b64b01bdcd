"""
Free-text media lookup: turn what a user types into candidate URLs.

Candidates are tried in this order:
1. an absolute local path becomes a file:// URL
2. text that already is a URL with a well-formed hostname
3. short platform ids (Bilibili av/BV ids, YouTube video ids)
4. the text with "https://" prepended, only if no id pattern matched

Every id pattern that matches adds a candidate. The https:// fallback is
skipped as soon as any of them matched, including a Bilibili id, so
"BV1xx411c7mD" does not also produce "https://BV1xx411c7mD".
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import PurePosixPath, PureWindowsPath
from urllib.parse import urlsplit

from mxmedia.config.loader import MxSettings
from mxmedia.exceptions import InvalidURLError
from mxmedia.models.media_url import MediaURL
from mxmedia.protocol import resolve_mx_protocol
from mxmedia.urls import split_url

logger = logging.getLogger(__name__)

# RFC 1123 hostname: dot-separated labels of letters, digits and inner hyphens
HOSTNAME_RE = re.compile(
    r"^(?:(?:[a-zA-Z\d]|[a-zA-Z\d][a-zA-Z\d-]*[a-zA-Z\d])\.)*"
    r"(?:[A-Za-z\d]|[A-Za-z\d][A-Za-z\d-]*[A-Za-z\d])$"
)

# Short id grammar -> canonical watch URL. Every match is kept.
ID_GUESSES: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"^av(?P<id>\d+)$", re.IGNORECASE), "https://www.bilibili.com/video/av{id}"),
    (
        re.compile(r"^(?P<id>BV1[1-9A-HJ-NP-Za-km-z]{9})$"),
        "https://www.bilibili.com/video/{id}",
    ),
    (re.compile(r"^(?P<id>[A-Za-z0-9_-]{11})$"), "https://www.youtube.com/watch?v={id}"),
)


def is_absolute_path(text: str) -> bool:
    return PurePosixPath(text).is_absolute() or PureWindowsPath(text).is_absolute()


def to_file_url(path: str) -> str | None:
    """file:// URL for an absolute local path.

    Network paths (\\\\server\\share) produce a URL with a host and are
    rejected: they have to be mapped to a local path first.
    """
    flavour = PurePosixPath if PurePosixPath(path).is_absolute() else PureWindowsPath
    try:
        url = flavour(path).as_uri()
    except ValueError as e:
        logger.warning(f"Failed to convert path {path} to URL: {e}")
        return None
    if urlsplit(url).netloc:
        logger.warning(f"Network path is not supported, map it to a local path: {path}")
        return None
    return url


def to_url_guess(query: str) -> str | None:
    """Interpret the text as a path or URL, without guessing."""
    if is_absolute_path(query):
        return to_file_url(query)
    try:
        parts = split_url(query)
    except InvalidURLError:
        return None
    if parts.scheme.lower() == "file" and not parts.netloc:
        return query
    if not HOSTNAME_RE.match(parts.hostname or ""):
        return None
    return query


def guess_urls(query: str) -> list[str]:
    """Candidate URLs for free text, in attempt order.

    The result may contain mx:// URLs; ``get_suggestions`` expands them.
    """
    query = query.strip()
    if not query:
        return []

    direct = to_url_guess(query)
    if direct:
        return [direct]

    guesses: list[str] = []
    for pattern, template in ID_GUESSES:
        match = pattern.match(query)
        if match:
            guesses.append(template.format(id=match.group("id")))

    if not guesses:
        fixed = to_url_guess(f"https://{query}")
        if fixed:
            guesses.append(fixed)

    logger.debug(f"Guesses for {query!r}: {guesses}")
    return guesses


def get_suggestions(
    query: str,
    settings: MxSettings | Mapping[str, str] | None = None,
) -> list[MediaURL]:
    """Media URLs to offer for free text, duplicates removed.

    Args:
        query: What the user typed
        settings: Alias mapping used to expand mx:// URLs
    """
    suggestions: list[MediaURL] = []
    for candidate in guess_urls(query):
        if settings is not None:
            candidate = resolve_mx_protocol(candidate, settings)
        url = MediaURL.try_create(candidate)
        if url is None:
            continue
        if any(url.compare(existing) for existing in suggestions):
            continue
        suggestions.append(url)
    return suggestions
