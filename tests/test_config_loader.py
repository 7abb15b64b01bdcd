"""Tests for the unified config loader."""

from pathlib import Path
from unittest.mock import patch

import pytest

from mxmedia.config.loader import (
    ConfigSource,
    MxConfig,
    _find_project_config,
    _get_root_dir,
    _get_user_config_path,
    _load_yaml_config,
    _resolve_config,
    clear_config_cache,
    get_config,
    get_url_mapping,
)
from mxmedia.exceptions import ConfigError


def write_config(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestConfigSource:
    """Tests for ConfigSource enum."""

    def test_config_source_values(self):
        assert ConfigSource.ENV.value == "env"
        assert ConfigSource.PROJECT.value == "project"
        assert ConfigSource.USER.value == "user"
        assert ConfigSource.DEFAULT.value == "default"


class TestMxConfig:
    """Tests for MxConfig dataclass."""

    def test_defaults(self, tmp_path):
        config = MxConfig(root_dir=tmp_path)
        assert config.source == ConfigSource.DEFAULT
        assert config.url_mapping == {}
        assert config.timestamp_offset == 0.0
        assert config.resource_path_prefix == "app://local/"
        assert config.get_url_mapping("anything") is None

    def test_config_repr(self, tmp_path):
        config = MxConfig(root_dir=tmp_path, url_mapping={"b": "/b", "a": "/a"})
        repr_str = repr(config)
        assert "source='default'" in repr_str
        assert "aliases=['a', 'b']" in repr_str

    def test_config_is_frozen(self, tmp_path):
        config = MxConfig(root_dir=tmp_path)
        with pytest.raises(AttributeError):
            config.root_dir = Path("/other")  # type: ignore

    def test_from_dict(self, tmp_path):
        config = MxConfig.from_dict(
            {"url_mapping": {"lec": " /mnt/lec "}, "timestamp_offset": -2},
            root_dir=tmp_path,
            source=ConfigSource.USER,
        )
        assert config.get_url_mapping("lec") == "/mnt/lec"
        assert config.timestamp_offset == -2.0

    @pytest.mark.parametrize(
        "data",
        [
            {"url_mapping": ["a", "b"]},
            {"url_mapping": {"a/b": "/x"}},
            {"url_mapping": {"": "/x"}},
            {"url_mapping": {"a": 3}},
            {"url_mapping": {"a": "  "}},
            {"timestamp_offset": "soon"},
            {"timestamp_offset": True},
            {"resource_path_prefix": 42},
        ],
    )
    def test_from_dict_invalid(self, tmp_path, data):
        with pytest.raises(ConfigError):
            MxConfig.from_dict(data, root_dir=tmp_path, source=ConfigSource.USER)


class TestLoadYamlConfig:
    """Tests for _load_yaml_config."""

    def test_load_nonexistent_file(self, tmp_path):
        assert _load_yaml_config(tmp_path / "nonexistent.yaml") is None

    def test_load_valid_yaml(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", "url_mapping:\n  a: /x\n")
        assert _load_yaml_config(config_file) == {"url_mapping": {"a": "/x"}}

    def test_load_empty_yaml(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", "")
        assert _load_yaml_config(config_file) == {}

    def test_load_invalid_yaml_type(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", "- item1\n- item2\n")
        assert _load_yaml_config(config_file) is None

    def test_load_broken_yaml(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", "url_mapping: [unclosed\n")
        assert _load_yaml_config(config_file) is None


class TestFindProjectConfig:
    """Tests for _find_project_config."""

    def test_finds_config_in_cwd(self, tmp_path, monkeypatch):
        config_file = write_config(tmp_path / ".mxmedia" / "config.yaml", "{}\n")
        monkeypatch.chdir(tmp_path)
        assert _find_project_config() == config_file

    def test_finds_config_in_parent(self, tmp_path, monkeypatch):
        config_file = write_config(tmp_path / ".mxmedia" / "config.yaml", "{}\n")
        subdir = tmp_path / "notes" / "media"
        subdir.mkdir(parents=True)
        monkeypatch.chdir(subdir)
        assert _find_project_config() == config_file

    def test_no_config_found(self):
        # conftest moves cwd into an empty directory
        assert _find_project_config() is None


class TestRootDir:
    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MXMEDIA_ROOT", str(tmp_path / "custom"))
        assert _get_root_dir() == (tmp_path / "custom").resolve()
        assert _get_user_config_path() == (tmp_path / "custom").resolve() / "config.yaml"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("MXMEDIA_ROOT", raising=False)
        with patch("mxmedia.config.loader.sys") as mock_sys:
            mock_sys.platform = "linux"
            assert _get_root_dir() == Path.home() / ".mxmedia"


class TestResolveConfig:
    """Tests for _resolve_config."""

    def test_defaults_when_nothing_found(self):
        result = _resolve_config()
        assert result.source == ConfigSource.DEFAULT
        assert result.url_mapping == {}

    def test_user_config(self):
        write_config(_get_user_config_path(), "url_mapping:\n  user: /u\n")
        result = _resolve_config()
        assert result.source == ConfigSource.USER
        assert result.get_url_mapping("user") == "/u"
        assert result.config_path == _get_user_config_path()

    def test_project_config_beats_user(self):
        write_config(_get_user_config_path(), "url_mapping:\n  user: /u\n")
        write_config(Path.cwd() / ".mxmedia" / "config.yaml", "url_mapping:\n  proj: /p\n")
        result = _resolve_config()
        assert result.source == ConfigSource.PROJECT
        assert result.get_url_mapping("proj") == "/p"
        assert result.get_url_mapping("user") is None

    def test_env_takes_priority(self, tmp_path, monkeypatch):
        env_file = write_config(tmp_path / "env.yaml", "url_mapping:\n  env: /e\n")
        write_config(Path.cwd() / ".mxmedia" / "config.yaml", "url_mapping:\n  proj: /p\n")
        monkeypatch.setenv("MXMEDIA_CONFIG", str(env_file))
        result = _resolve_config()
        assert result.source == ConfigSource.ENV
        assert result.get_url_mapping("env") == "/e"

    def test_missing_env_file_falls_through(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MXMEDIA_CONFIG", str(tmp_path / "missing.yaml"))
        write_config(_get_user_config_path(), "url_mapping:\n  user: /u\n")
        assert _resolve_config().source == ConfigSource.USER

    def test_invalid_project_config_skipped(self):
        write_config(_get_user_config_path(), "url_mapping:\n  user: /u\n")
        write_config(Path.cwd() / ".mxmedia" / "config.yaml", "url_mapping:\n  a/b: /p\n")
        result = _resolve_config()
        assert result.source == ConfigSource.USER


class TestGetConfig:
    def test_cached(self):
        assert get_config() is get_config()

    def test_clear_cache(self):
        first = get_config()
        write_config(_get_user_config_path(), "url_mapping:\n  user: /u\n")
        assert get_url_mapping("user") is None
        clear_config_cache()
        assert get_config() is not first
        assert get_url_mapping("user") == "/u"
