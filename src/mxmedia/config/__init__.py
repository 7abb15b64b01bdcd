"""
Configuration for mxmedia: defaults and the YAML config loader.
"""

from mxmedia.config.defaults import (
    ALLOWED_PROTOCOLS,
    DEFAULT_RESOURCE_PATH_PREFIX,
    MX_PROTOCOL,
)
from mxmedia.config.loader import (
    ConfigSource,
    MxConfig,
    MxSettings,
    clear_config_cache,
    get_config,
    get_url_mapping,
)

__all__ = [
    "ALLOWED_PROTOCOLS",
    "DEFAULT_RESOURCE_PATH_PREFIX",
    "MX_PROTOCOL",
    # Config loader
    "ConfigSource",
    "MxConfig",
    "MxSettings",
    "clear_config_cache",
    "get_config",
    "get_url_mapping",
]
