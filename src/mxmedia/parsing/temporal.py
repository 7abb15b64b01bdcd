"""
Temporal fragments: playback time ranges stored in a URL hash.

The hash is a list of key=value pairs joined by "&" or ";". The temporal
fragment is the pair with key "t", whose value is "<start>" or
"<start>,<end>" in seconds, following the W3C Media Fragments syntax:

    #t=30          start at 30s, play to the end
    #t=30,45.5     play from 30s to 45.5s
    #t=,20         play from the beginning to 20s
    #t=npt:1:30    "npt:" prefix and clock values are accepted on input

Encoding always produces the plain seconds form.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from mxmedia.parsing.params import parse_timestamp
from mxmedia.utils.formatting import format_seconds

TEMP_FRAG_KEY = "t"

_PAIR_SEP_RE = re.compile(r"([&;])")


@dataclass(frozen=True)
class TempFragment:
    """Requested playback window. ``end == -1`` means play to the end."""

    start: float
    end: float = -1

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end != -1 and self.end < self.start:
            raise ValueError(f"end {self.end} is before start {self.start}")

    @property
    def is_timestamp(self) -> bool:
        """True for a single point in time (no end)."""
        return self.end == -1


def _split_pairs(hash_: str) -> list[tuple[str, str]]:
    """Split a hash into (separator, pair) tuples.

    Each pair keeps the separator that preceded it; the first one's is "".
    """
    pairs: list[tuple[str, str]] = []
    sep = ""
    for i, token in enumerate(_PAIR_SEP_RE.split(hash_.lstrip("#"))):
        if i % 2:
            sep = token
        elif token:
            pairs.append((sep, token))
    return pairs


def _join_pairs(pairs: list[tuple[str, str]]) -> str:
    return "".join(pair if i == 0 else sep + pair for i, (sep, pair) in enumerate(pairs))


def _default_sep(pairs: list[tuple[str, str]]) -> str:
    seps = {sep for sep, _ in pairs[1:]}
    return ";" if seps == {";"} else "&"


def _is_temp_frag_pair(pair: str) -> bool:
    return pair.split("=", 1)[0] == TEMP_FRAG_KEY


def _parse_time(value: str) -> float | None:
    if value.startswith("npt:"):
        value = value[4:]
    return parse_timestamp(value)


def decode_temp_frag(hash_: str | None) -> TempFragment | None:
    """Parse the temporal fragment out of a URL hash.

    Args:
        hash_: Hash with or without the leading "#"

    Returns:
        TempFragment, or None if the hash has no (valid) "t" pair
    """
    if not hash_:
        return None
    for _, pair in _split_pairs(hash_):
        key, _, value = pair.partition("=")
        if key != TEMP_FRAG_KEY:
            continue

        parts = value.split(",")
        if len(parts) > 2:
            return None
        start_str = parts[0]
        end_str = parts[1] if len(parts) == 2 else ""

        if not start_str and not end_str:
            return None
        start = _parse_time(start_str) if start_str else 0.0
        end = _parse_time(end_str) if end_str else -1
        if start is None or end is None:
            return None
        if end != -1 and end < start:
            return None
        return TempFragment(start=start, end=end)
    return None


def encode_temp_frag(frag: TempFragment) -> str:
    """Encode a fragment as ``t=<start>[,<end>]`` (no leading "#")."""
    value = format_seconds(frag.start)
    if frag.end != -1:
        value += "," + format_seconds(frag.end)
    return f"{TEMP_FRAG_KEY}={value}"


def remove_temp_frag(hash_: str) -> str:
    """Drop any "t" pair from a hash, keeping everything else as written."""
    return _join_pairs([p for p in _split_pairs(hash_) if not _is_temp_frag_pair(p[1])])


def add_temp_frag(hash_: str, frag: TempFragment) -> str:
    """Replace the temporal fragment in a hash with ``frag``.

    An existing "t" pair is replaced where it stands; otherwise the new
    pair is appended.
    """
    encoded = encode_temp_frag(frag)
    pairs = _split_pairs(hash_)
    result: list[tuple[str, str]] = []
    replaced = False
    for sep, pair in pairs:
        if not _is_temp_frag_pair(pair):
            result.append((sep, pair))
        elif not replaced:
            result.append((sep, encoded))
            replaced = True
    if not replaced:
        result.append((_default_sep(pairs), encoded))
    return _join_pairs(result)
