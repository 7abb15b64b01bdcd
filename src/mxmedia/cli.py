#!/usr/bin/env python3
"""
mxmedia CLI - Inspect how media links resolve.

Usage:
    mxmedia resolve "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=30"
    mxmedia guess BV1xx411c7mD
    mxmedia remap "mx://lectures/week1/intro.mp4"
    mxmedia timestamp 3725
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from mxmedia.config.loader import get_config
from mxmedia.exceptions import MxMediaError
from mxmedia.models.media_url import MediaURL
from mxmedia.protocol import resolve_mx_protocol
from mxmedia.resolver import MediaResolver
from mxmedia.utils.formatting import format_duration


def _cmd_resolve(args):
    """Handle the resolve subcommand."""
    url = MediaURL.create(resolve_mx_protocol(args.url, get_config()))
    frag = url.temp_frag
    print(
        json.dumps(
            {
                "href": url.href,
                "type": url.type.value,
                "id": url.id,
                "cleaned": url.cleaned,
                "source": url.source,
                "inferred_type": url.inferred_type.value if url.inferred_type else None,
                "temp_frag": {"start": frag.start, "end": frag.end} if frag else None,
            },
            indent=2,
        )
    )


def _cmd_guess(args):
    """Handle the guess subcommand."""
    suggestions = MediaResolver().suggest(args.query)
    if not suggestions:
        print("No candidates.")
        sys.exit(1)
    for url in suggestions:
        print(url.href)


def _cmd_remap(args):
    """Handle the remap subcommand."""
    print(resolve_mx_protocol(args.url, get_config()))


def _cmd_timestamp(args):
    """Handle the timestamp subcommand."""
    print(format_duration(args.seconds))


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="mxmedia",
        description="Resolve media links the way notes store them.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("resolve", help="Classify and canonicalize a URL")
    p.add_argument("url", help="http(s), file or mx:// URL")
    p.set_defaults(func=_cmd_resolve)

    p = subparsers.add_parser("guess", help="Candidate URLs for free text")
    p.add_argument("query", help="Path, URL or media id")
    p.set_defaults(func=_cmd_guess)

    p = subparsers.add_parser("remap", help="Expand an mx:// URL")
    p.add_argument("url", help="mx://<alias>/<path>")
    p.set_defaults(func=_cmd_remap)

    p = subparsers.add_parser("timestamp", help="Format seconds as H:MM:SS")
    p.add_argument("seconds", type=float)
    p.set_defaults(func=_cmd_timestamp)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except MxMediaError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
