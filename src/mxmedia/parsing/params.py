"""
URL query parameter extraction and timestamp parsing.

Extracts well-known query parameters from media URLs (start times, private
hashes, video parts), strips tracking parameters, and parses various
timestamp formats to float seconds.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from urllib.parse import parse_qs, unquote_plus

# Mapping: host name -> {url_param: canonical_field_name}
PROVIDER_PARAMS: dict[str, dict[str, str]] = {
    "youtube": {
        "t": "start_time",
        "start": "start_time",
    },
    "bilibili": {
        "t": "start_time",
        "p": "part",
    },
    "vimeo": {
        "h": "private_hash",
        "time": "start_time",
    },
}

# Query parameters that never identify a resource
TRACKING_PARAMS = frozenset(
    {
        "fbclid",
        "gclid",
        "dclid",
        "msclkid",
        "mc_cid",
        "mc_eid",
        "igshid",
        "si",
        "spm_id_from",
        "vd_source",
        "share_source",
    }
)
_TRACKING_PREFIXES = ("utm_",)

# Regex for XhYmZs compact timestamp format (e.g. "1h2m3s", "2m30s", "45s")
_COMPACT_TS_RE = re.compile(
    r"^(?:(\d+)h)?(?:(\d+)m)?(?:(\d+(?:\.\d+)?)s)?$",
    re.IGNORECASE,
)


def extract_query_params(query: str, provider_name: str) -> dict[str, str]:
    """Extract known query parameters from a URL query string.

    Args:
        query: Raw query string, without the leading "?".
        provider_name: Lowercase host name (e.g. "youtube", "vimeo").

    Returns:
        Dict mapping canonical field names to their string values.
        Empty dict if no known parameters are found.
    """
    qs = parse_qs(query)

    result: dict[str, str] = {}

    # First match wins when multiple params map to same field
    provider_map = PROVIDER_PARAMS.get(provider_name.lower(), {})
    for param, field in provider_map.items():
        if field not in result:
            values = qs.get(param)
            if values:
                result[field] = values[0]

    return result


def extract_start_time(query: str, provider_name: str) -> float | None:
    """Return the start time encoded in the query string, in seconds."""
    value = extract_query_params(query, provider_name).get("start_time")
    if value is None:
        return None
    return parse_timestamp(value)


def is_tracking_param(name: str) -> bool:
    """Check if a query parameter name is a known tracking parameter."""
    name = name.lower()
    return name in TRACKING_PARAMS or name.startswith(_TRACKING_PREFIXES)


def start_time_params(provider_name: str) -> list[str]:
    """Query parameters a host reads its start time from."""
    provider_map = PROVIDER_PARAMS.get(provider_name.lower(), {})
    return [param for param, field in provider_map.items() if field == "start_time"]


def _filter_query(query: str, drop: Callable[[str], bool]) -> str:
    if not query:
        return ""
    kept = [
        pair
        for pair in query.split("&")
        if pair and not drop(unquote_plus(pair.split("=", 1)[0]))
    ]
    return "&".join(kept)


def strip_tracking_params(query: str) -> str:
    """Remove tracking parameters from a raw query string.

    Remaining pairs keep their original order and encoding.
    """
    return _filter_query(query, is_tracking_param)


def remove_query_params(query: str, names: Iterable[str]) -> str:
    """Remove the named parameters from a raw query string."""
    dropped = frozenset(names)
    return _filter_query(query, lambda name: name in dropped)


def parse_timestamp(value: str) -> float | None:
    """Parse various timestamp formats to seconds.

    Supports:
      - Pure seconds: "120", "30.5"
      - Compact duration: "2m30s", "1h2m3s", "45s"
      - Colon format: "1:30:45" (h:m:s), "2:30" (m:s), "2:30.5"

    Args:
        value: Timestamp string to parse.

    Returns:
        Float seconds, or None if the value cannot be parsed.
    """
    value = value.strip()
    if not value:
        return None

    # Try pure seconds (integer or float)
    try:
        result = float(value)
    except ValueError:
        pass
    else:
        if result < 0 or result != result or result == float("inf"):
            return None
        return result

    # Try compact format: XhYmZs
    m = _COMPACT_TS_RE.match(value)
    if m and any(m.groups()):
        hours = int(m.group(1) or 0)
        minutes = int(m.group(2) or 0)
        seconds = float(m.group(3) or 0)
        return hours * 3600 + minutes * 60 + seconds

    # Try colon format: H:M:S or M:S
    parts = value.split(":")
    if len(parts) in (2, 3):
        try:
            *head, last = parts
            int_parts = [int(p) for p in head]
            secs = float(last)
        except ValueError:
            return None
        if any(p < 0 for p in int_parts) or secs < 0 or not last[:1].isdigit():
            return None
        if len(int_parts) == 2:
            return float(int_parts[0] * 3600 + int_parts[1] * 60) + secs
        return float(int_parts[0] * 60) + secs

    return None
