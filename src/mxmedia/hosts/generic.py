"""Fallback for any http(s) or file URL no platform handler claims."""

from __future__ import annotations

from urllib.parse import SplitResult, urlunsplit

from mxmedia.hosts.base import HostHandler, MediaHost, ResolveResult
from mxmedia.parsing.params import strip_tracking_params


class GenericHandler(HostHandler):
    host = MediaHost.GENERIC

    def detect(self, url: SplitResult) -> bool:
        return True

    def resolve(self, url: SplitResult) -> ResolveResult:
        query = url.query if url.scheme == "file" else strip_tracking_params(url.query)
        return ResolveResult(
            source=urlunsplit(url),
            cleaned=urlunsplit(url._replace(query=query)),
        )
