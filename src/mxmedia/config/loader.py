"""
Unified configuration loader with priority resolution.

Root directory (MXMEDIA_ROOT):
- macOS/Linux: ~/.mxmedia
- Windows: %APPDATA%\\mxmedia
- Override: MXMEDIA_ROOT environment variable

Config file priority (highest to lowest, first one found is used):
1. Environment variable (MXMEDIA_CONFIG) naming a YAML file
2. Project config (.mxmedia/config.yaml, searched upward from cwd)
3. User config ({root_dir}/config.yaml)
4. Defaults (no URL mappings)

Example config.yaml:

    url_mapping:
      lectures: /mnt/media/lectures
      nas: https://nas.local/share/
    timestamp_offset: -2
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Protocol

import yaml

from mxmedia.config.defaults import (
    DEFAULT_RESOURCE_PATH_PREFIX,
    DEFAULT_TIMESTAMP_OFFSET,
)
from mxmedia.exceptions import ConfigError

logger = logging.getLogger(__name__)


class ConfigSource(Enum):
    """Source of the configuration value."""

    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


class MxSettings(Protocol):
    """Read-only settings surface the resolver needs."""

    def get_url_mapping(self, alias: str) -> str | None: ...


@dataclass(frozen=True)
class MxConfig:
    """Resolved mxmedia configuration."""

    root_dir: Path
    source: ConfigSource = ConfigSource.DEFAULT
    url_mapping: dict[str, str] = field(default_factory=dict)
    timestamp_offset: float = DEFAULT_TIMESTAMP_OFFSET
    resource_path_prefix: str = DEFAULT_RESOURCE_PATH_PREFIX
    config_path: Path | None = None

    def get_url_mapping(self, alias: str) -> str | None:
        """Return the target prefix configured for an mx:// alias."""
        return self.url_mapping.get(alias)

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        *,
        root_dir: Path,
        source: ConfigSource,
        config_path: Path | None = None,
    ) -> MxConfig:
        """Build a config from a parsed YAML dict.

        Raises:
            ConfigError: If a value has the wrong type or an alias is invalid
        """
        mapping = _parse_url_mapping(data.get("url_mapping"))

        offset = data.get("timestamp_offset", DEFAULT_TIMESTAMP_OFFSET)
        if isinstance(offset, bool) or not isinstance(offset, (int, float)):
            raise ConfigError(f"timestamp_offset must be a number, got {offset!r}")

        prefix = data.get("resource_path_prefix", DEFAULT_RESOURCE_PATH_PREFIX)
        if not isinstance(prefix, str):
            raise ConfigError(f"resource_path_prefix must be a string, got {prefix!r}")

        return cls(
            root_dir=root_dir,
            source=source,
            url_mapping=mapping,
            timestamp_offset=float(offset),
            resource_path_prefix=prefix,
            config_path=config_path,
        )

    def __repr__(self) -> str:
        return (
            f"MxConfig(root_dir={self.root_dir!r}, source={self.source.value!r}, "
            f"aliases={sorted(self.url_mapping)!r})"
        )


def _parse_url_mapping(raw: Any) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"url_mapping must be a mapping, got {type(raw).__name__}")

    mapping: dict[str, str] = {}
    for alias, target in raw.items():
        if not isinstance(alias, str) or not alias or "/" in alias:
            raise ConfigError(f"Invalid protocol alias {alias!r}")
        if not isinstance(target, str) or not target.strip():
            raise ConfigError(f"Target for alias {alias!r} must be a non-empty string")
        mapping[alias] = target.strip()
    return mapping


def _load_yaml_config(config_path: Path) -> dict[str, Any] | None:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Parsed config dict, or None if file doesn't exist or fails to parse.
    """
    if not config_path.exists():
        return None

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return None

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.warning(f"Config file {config_path} is not a valid YAML dict")
        return None
    return config


def _find_project_config() -> Path | None:
    """Find project-level config by walking up from cwd.

    Returns:
        Path to .mxmedia/config.yaml if found, None otherwise.
    """
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        config_path = parent / ".mxmedia" / "config.yaml"
        if config_path.exists():
            return config_path
    return None


def _get_root_dir() -> Path:
    """Get the mxmedia root directory.

    Priority:
    1. MXMEDIA_ROOT environment variable
    2. Platform-specific default:
       - Windows: %APPDATA%\\mxmedia
       - macOS/Linux: ~/.mxmedia

    Returns:
        Path to the root directory (may not exist yet).
    """
    env_root = os.environ.get("MXMEDIA_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "mxmedia"
        return Path.home() / "AppData" / "Roaming" / "mxmedia"
    return Path.home() / ".mxmedia"


def _get_user_config_path() -> Path:
    """Get the user-level config path ({root_dir}/config.yaml)."""
    return _get_root_dir() / "config.yaml"


def _candidate_configs() -> list[tuple[Path, ConfigSource]]:
    candidates: list[tuple[Path, ConfigSource]] = []
    env_config = os.environ.get("MXMEDIA_CONFIG")
    if env_config:
        candidates.append((Path(env_config).expanduser(), ConfigSource.ENV))
    project_config = _find_project_config()
    if project_config:
        candidates.append((project_config, ConfigSource.PROJECT))
    candidates.append((_get_user_config_path(), ConfigSource.USER))
    return candidates


def _resolve_config() -> MxConfig:
    """Resolve configuration from all sources in priority order.

    A file that is missing, unparseable or invalid is skipped with a
    warning and the next source is tried.

    Returns:
        Resolved MxConfig.
    """
    root_dir = _get_root_dir()

    for config_path, source in _candidate_configs():
        data = _load_yaml_config(config_path)
        if data is None:
            if source is ConfigSource.ENV:
                logger.warning(f"MXMEDIA_CONFIG points to unusable file {config_path}")
            continue
        try:
            config = MxConfig.from_dict(
                data, root_dir=root_dir, source=source, config_path=config_path
            )
        except ConfigError as e:
            logger.warning(f"Ignoring invalid config {config_path}: {e}")
            continue
        logger.info(f"Using {source.value} config {config_path}")
        return config

    logger.debug("No config file found, using defaults")
    return MxConfig(root_dir=root_dir)


@lru_cache(maxsize=1)
def get_config() -> MxConfig:
    """Get resolved mxmedia configuration.

    Results are cached - configuration is resolved once per process.
    To force re-resolution (e.g., after env change), use clear_config_cache().
    """
    return _resolve_config()


def get_url_mapping(alias: str) -> str | None:
    """Look up an mx:// alias in the resolved configuration."""
    return get_config().get_url_mapping(alias)


def clear_config_cache() -> None:
    """Clear the cached configuration.

    Call this if environment variables or config files have changed
    and you need to re-resolve the configuration.
    """
    get_config.cache_clear()
