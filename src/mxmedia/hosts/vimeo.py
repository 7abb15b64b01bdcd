"""Vimeo pages and player embeds, including unlisted (hashed) videos."""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from mxmedia.hosts.base import (
    HostHandler,
    MediaHost,
    ResolveResult,
    is_web_url,
    start_fragment,
)
from mxmedia.parsing.params import extract_query_params, parse_timestamp

VIMEO_HOSTS = frozenset({"vimeo.com", "www.vimeo.com"})
VIMEO_PLAYER_HOST = "player.vimeo.com"

_PAGE_PATH_RES = (
    re.compile(r"^/(?:video/)?(?P<video_id>\d+)(?:/(?P<hash>[0-9a-f]+))?/?$"),
    re.compile(r"^/channels/[\w-]+/(?P<video_id>\d+)/?$"),
    re.compile(r"^/groups/[\w-]+/videos/(?P<video_id>\d+)/?$"),
    re.compile(r"^/showcase/\d+/video/(?P<video_id>\d+)/?$"),
)
_PLAYER_PATH_RE = re.compile(r"^/video/(?P<video_id>\d+)/?$")

_HASH_RE = re.compile(r"^[0-9a-f]+$")


def _match_path(url: SplitResult) -> re.Match | None:
    if not is_web_url(url):
        return None
    if url.hostname == VIMEO_PLAYER_HOST:
        return _PLAYER_PATH_RE.match(url.path)
    if url.hostname in VIMEO_HOSTS:
        for pattern in _PAGE_PATH_RES:
            match = pattern.match(url.path)
            if match:
                return match
    return None


class VimeoHandler(HostHandler):
    host = MediaHost.VIMEO

    def detect(self, url: SplitResult) -> bool:
        return _match_path(url) is not None

    def resolve(self, url: SplitResult) -> ResolveResult | None:
        match = _match_path(url)
        if match is None:
            return None

        video_id = match.group("video_id")
        params = extract_query_params(url.query, "vimeo")
        private_hash = match.groupdict().get("hash") or params.get("private_hash")
        if private_hash and not _HASH_RE.match(private_hash):
            private_hash = None

        cleaned = f"https://vimeo.com/{video_id}"
        source = f"https://player.vimeo.com/video/{video_id}"
        if private_hash:
            cleaned += f"/{private_hash}"
            source += f"?h={private_hash}"

        start = params.get("start_time")
        fragment = start_fragment(parse_timestamp(start) if start else None)
        if fragment:
            cleaned += "#" + fragment

        return ResolveResult(source=source, cleaned=cleaned, id=video_id)
