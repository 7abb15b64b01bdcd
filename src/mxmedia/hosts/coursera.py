"""Coursera lecture pages."""

from __future__ import annotations

import re
from urllib.parse import SplitResult

from mxmedia.hosts.base import HostHandler, MediaHost, ResolveResult, is_web_url

COURSERA_HOSTS = frozenset({"coursera.org", "www.coursera.org"})

_LECTURE_PATH_RE = re.compile(
    r"^/learn/(?P<course>[\w-]+)/lecture/(?P<lecture>[A-Za-z0-9]+)(?:/[^/]*)?/?$"
)


def _match_lecture(url: SplitResult) -> re.Match | None:
    if not is_web_url(url) or url.hostname not in COURSERA_HOSTS:
        return None
    return _LECTURE_PATH_RE.match(url.path)


class CourseraHandler(HostHandler):
    host = MediaHost.COURSERA

    def detect(self, url: SplitResult) -> bool:
        return _match_lecture(url) is not None

    def resolve(self, url: SplitResult) -> ResolveResult | None:
        match = _match_lecture(url)
        if match is None:
            return None
        course, lecture = match.group("course"), match.group("lecture")
        cleaned = f"https://www.coursera.org/learn/{course}/lecture/{lecture}"
        return ResolveResult(source=cleaned, cleaned=cleaned, id=f"{course}/{lecture}")
