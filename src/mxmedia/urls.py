"""
URL parsing and normalization for mxmedia.

Every URL that reaches a host resolver has been through ``parse_url``:
scheme and host lowercased, default ports dropped, empty paths turned
into "/" and unsafe characters percent-encoded, so that two spellings of
the same resource compare equal as strings.
"""

from __future__ import annotations

from urllib.parse import SplitResult, quote, urlsplit, urlunsplit

from mxmedia.config.defaults import ALLOWED_PROTOCOLS, DEFAULT_PORTS
from mxmedia.exceptions import InvalidURLError, UnsupportedProtocolError

# Characters left alone when percent-encoding URL components
_PATH_SAFE = "/%:@!$&'()*+,;=~"
_QUERY_SAFE = _PATH_SAFE + "?"


def split_url(value: str) -> SplitResult:
    """Split an absolute URL of any scheme, without protocol checks.

    Raises:
        InvalidURLError: If the value is empty, has no scheme, or has a
            malformed authority (bad port, broken IPv6 literal)
    """
    if not isinstance(value, str):
        raise InvalidURLError(repr(value))
    value = value.strip()
    if not value:
        raise InvalidURLError(value, "URL cannot be empty")

    try:
        parts = urlsplit(value)
        # Accessing .port validates it
        parts.port
    except ValueError as e:
        raise InvalidURLError(value, f"Invalid URL {value!r}: {e}") from e

    if not parts.scheme:
        raise InvalidURLError(value)
    return parts


def _normalize_netloc(parts: SplitResult, scheme: str) -> str:
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    netloc = host
    port = parts.port
    if port is not None and DEFAULT_PORTS.get(scheme) != port:
        netloc += f":{port}"
    if "@" in parts.netloc:
        userinfo = parts.netloc.rpartition("@")[0]
        netloc = f"{userinfo}@{netloc}"
    return netloc


def parse_url(value: str) -> SplitResult:
    """Parse and normalize a URL allowed as a media reference.

    Args:
        value: Absolute http(s) or file URL

    Returns:
        Normalized SplitResult

    Raises:
        InvalidURLError: If the value is not an absolute URL
        UnsupportedProtocolError: If the scheme is not http, https or file
    """
    parts = split_url(value)
    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_PROTOCOLS:
        raise UnsupportedProtocolError(scheme)

    netloc = _normalize_netloc(parts, scheme)
    if scheme == "file":
        if netloc == "localhost":
            netloc = ""
    elif not netloc:
        raise InvalidURLError(value, f"Invalid URL {value!r}: missing host")

    path = quote(parts.path, safe=_PATH_SAFE) or "/"
    query = quote(parts.query, safe=_QUERY_SAFE)
    fragment = quote(parts.fragment, safe=_QUERY_SAFE)
    return SplitResult(scheme, netloc, path, query, fragment)


def no_hash(url: str) -> str:
    """Return the URL with its fragment removed."""
    return urlunsplit(urlsplit(url)._replace(fragment=""))


def with_hash(url: str, fragment: str) -> str:
    """Return the URL with its fragment replaced."""
    return urlunsplit(urlsplit(url)._replace(fragment=fragment.lstrip("#")))
