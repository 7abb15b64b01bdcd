"""
The mx:// pseudo-protocol and local file references.

``mx://<alias>/<path>`` refers to a file below a folder (or remote
prefix) the user configured under ``<alias>``. Notes store the short
form, so moving the media library only means changing one mapping.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from urllib.parse import urlunsplit

from mxmedia.config.defaults import ALLOWED_PROTOCOLS, DEFAULT_RESOURCE_PATH_PREFIX, MX_PROTOCOL
from mxmedia.config.loader import MxSettings
from mxmedia.exceptions import InvalidURLError, UnknownMediaTypeError
from mxmedia.models.media_type import check_media_type
from mxmedia.models.media_url import MediaURL
from mxmedia.urls import split_url

logger = logging.getLogger(__name__)


def _lookup(settings: MxSettings | Mapping[str, str], alias: str) -> str | None:
    if isinstance(settings, Mapping):
        return settings.get(alias)
    return settings.get_url_mapping(alias)


def _local_path_to_uri(target: str) -> str | None:
    """file:// URI for an absolute POSIX or Windows path, else None."""
    for flavour in (PurePosixPath, PureWindowsPath):
        path = flavour(target)
        if path.is_absolute():
            return path.as_uri()
    return None


def target_prefix(target: str) -> str | None:
    """Normalize a mapping target into a URL prefix ending in one "/".

    Targets may be URLs (http, https, file) or absolute local paths.
    Returns None for targets that are neither.
    """
    target = target.strip()
    scheme = target.split(":", 1)[0].lower() if ":" in target else ""
    # Single-letter schemes are Windows drive letters
    if len(scheme) > 1 and scheme in ALLOWED_PROTOCOLS:
        prefix = target
    else:
        prefix = _local_path_to_uri(target)
        if prefix is None:
            return None
    return prefix.rstrip("/") + "/"


def resolve_mx_protocol(
    src: str | None,
    settings: MxSettings | Mapping[str, str],
) -> str | None:
    """Expand an mx://<alias>/ URL using the configured alias mapping.

    URLs of any other protocol, and mx:// URLs whose alias has no usable
    mapping, are returned unchanged.

    Args:
        src: URL string, or None
        settings: Object with ``get_url_mapping(alias)``, or a plain dict

    Returns:
        The expanded URL string, ``src`` itself, or None if ``src`` is None

    Raises:
        InvalidURLError: If ``src`` is not an absolute URL
    """
    if src is None:
        return None
    parts = split_url(src)
    if parts.scheme.lower() != MX_PROTOCOL:
        return src

    alias = parts.netloc
    target = _lookup(settings, alias)
    if not target:
        logger.debug(f"No mapping for mx protocol alias {alias!r}")
        return src

    prefix = target_prefix(target)
    if prefix is None:
        logger.warning(f"Mapping for {alias!r} is not a URL or absolute path: {target!r}")
        return src

    rest = urlunsplit(("", "", parts.path.lstrip("/"), parts.query, parts.fragment))
    return prefix + rest


def to_mx_url(url: str, alias: str, target: str) -> str | None:
    """Inverse of ``resolve_mx_protocol`` for one alias.

    Returns:
        ``mx://<alias>/<rest>`` if ``url`` lies below ``target``, else None
    """
    prefix = target_prefix(target)
    if prefix is None or not url.startswith(prefix):
        return None
    return f"{MX_PROTOCOL}://{alias}/{url[len(prefix):]}"


def from_file(
    file: str | PurePath,
    get_resource_path: Callable[[str | PurePath], str] | None = None,
    *,
    resource_path_prefix: str = DEFAULT_RESOURCE_PATH_PREFIX,
) -> MediaURL:
    """Build a file:// MediaURL for a local media file.

    Args:
        file: Path of the media file
        get_resource_path: Host callback turning the file into a resource
            URL (``app://local/<path>?<mtime>``). Without it, ``file``
            must be an absolute path.
        resource_path_prefix: Prefix the callback puts before the path

    Raises:
        UnknownMediaTypeError: If the extension is not audio or video
        InvalidURLError: If no file URL can be built for ``file``
    """
    suffix = PurePath(file).suffix.lstrip(".")
    if check_media_type(suffix) is None:
        raise UnknownMediaTypeError(suffix)

    if get_resource_path is None:
        url = _local_path_to_uri(str(file))
        if url is None:
            raise InvalidURLError(str(file), f"Not an absolute path: {file}")
        return MediaURL.create(url)

    resource_url = get_resource_path(file)
    if resource_url.startswith(resource_path_prefix):
        # Drop the cache-busting query the host appends
        path = resource_url[len(resource_path_prefix):].split("?", 1)[0]
        resource_url = "file:///" + path.lstrip("/")
    return MediaURL.create(resource_url)
