"""
mxmedia - Media link resolution for note-taking.

Turns whatever ends up in a note (web URLs, local paths, short platform
ids, mx:// folder aliases) into one canonical, comparable MediaURL:
1. Classify the URL by media host (YouTube, Bilibili, Vimeo, Coursera, generic)
2. Derive its canonical URL, player source and host-native id
3. Read and rewrite playback timestamps kept in the URL hash (#t=30,45)
"""

# Config
from mxmedia.config.loader import (
    ConfigSource,
    MxConfig,
    MxSettings,
    clear_config_cache,
    get_config,
)

# Exceptions
from mxmedia.exceptions import (
    ConfigError,
    InvalidURLError,
    MxMediaError,
    UnknownMediaTypeError,
    UnsupportedProtocolError,
)

# Hosts
from mxmedia.hosts import MediaHost, ResolveResult, list_supported_hosts, resolve_url

# Models
from mxmedia.models.media_type import MediaType, check_media_type
from mxmedia.models.media_url import MediaURL

# Temporal fragments
from mxmedia.parsing.temporal import (
    TempFragment,
    decode_temp_frag,
    encode_temp_frag,
)
from mxmedia.protocol import from_file, resolve_mx_protocol, to_mx_url
from mxmedia.resolver import MediaResolver
from mxmedia.switcher import get_suggestions, guess_urls
from mxmedia.timestamp import timestamp_link
from mxmedia.utils.formatting import format_duration

__version__ = "0.1.0"

__all__ = [
    # Config
    "ConfigSource",
    "MxConfig",
    "MxSettings",
    "clear_config_cache",
    "get_config",
    # Exceptions
    "ConfigError",
    "InvalidURLError",
    "MxMediaError",
    "UnknownMediaTypeError",
    "UnsupportedProtocolError",
    # Hosts
    "MediaHost",
    "ResolveResult",
    "list_supported_hosts",
    "resolve_url",
    # Models
    "MediaType",
    "MediaURL",
    "check_media_type",
    # Temporal fragments
    "TempFragment",
    "decode_temp_frag",
    "encode_temp_frag",
    "format_duration",
    "timestamp_link",
    # mx:// protocol and files
    "from_file",
    "resolve_mx_protocol",
    "to_mx_url",
    # Lookup
    "MediaResolver",
    "get_suggestions",
    "guess_urls",
]
