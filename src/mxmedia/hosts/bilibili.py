"""Bilibili video pages (BV and av ids)."""

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

BILIBILI_HOSTS = frozenset({"bilibili.com", "www.bilibili.com", "m.bilibili.com"})

# BV id: "BV1" + 9 base58 chars (no 0, I, O, l)
BV_ID_RE = re.compile(r"^BV1[1-9A-HJ-NP-Za-km-z]{9}$")
AV_ID_RE = re.compile(r"^av(\d+)$", re.IGNORECASE)

_VIDEO_PATH_RE = re.compile(r"^/video/([^/]+)/?$")


def extract_bilibili_id(url: SplitResult) -> str | None:
    """Extract the BV or av id (av ids lowercased to "av<digits>")."""
    if not is_web_url(url) or url.hostname not in BILIBILI_HOSTS:
        return None
    match = _VIDEO_PATH_RE.match(url.path)
    if not match:
        return None
    candidate = match.group(1)
    if BV_ID_RE.match(candidate):
        return candidate
    av = AV_ID_RE.match(candidate)
    if av:
        return f"av{av.group(1)}"
    return None


class BilibiliHandler(HostHandler):
    host = MediaHost.BILIBILI

    def detect(self, url: SplitResult) -> bool:
        return extract_bilibili_id(url) is not None

    def resolve(self, url: SplitResult) -> ResolveResult | None:
        video_id = extract_bilibili_id(url)
        if video_id is None:
            return None

        params = extract_query_params(url.query, "bilibili")
        page = f"https://www.bilibili.com/video/{video_id}"
        part = params.get("part", "")
        # Part 1 is the default page, omitted so both spellings compare equal
        if part.isdigit() and int(part) > 1:
            page += f"?p={int(part)}"

        cleaned = page
        start = params.get("start_time")
        fragment = start_fragment(parse_timestamp(start) if start else None)
        if fragment:
            cleaned += "#" + fragment

        return ResolveResult(source=page, cleaned=cleaned, id=video_id)
