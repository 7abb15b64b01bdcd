"""
Default configuration values for mxmedia.

Note: URL mappings are configured via config/loader.py which supports
an environment variable (MXMEDIA_CONFIG), project config, and user config.
"""

# Protocols a MediaURL may carry
ALLOWED_PROTOCOLS = frozenset({"http", "https", "file"})

# Internal pseudo-protocol for folder aliases: mx://<alias>/<path>
MX_PROTOCOL = "mx"

# Default ports dropped from canonical URLs
DEFAULT_PORTS = {"http": 80, "https": 443}

# Prefix the host application puts in front of local resource URLs
DEFAULT_RESOURCE_PATH_PREFIX = "app://local/"

# Seconds added to the player time when generating timestamp links
DEFAULT_TIMESTAMP_OFFSET = 0.0
