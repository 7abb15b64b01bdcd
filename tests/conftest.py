"""Pytest configuration for mxmedia tests."""

import pytest

from mxmedia.config.loader import clear_config_cache


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real user/project config files."""
    root = tmp_path / "mxroot"
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("MXMEDIA_ROOT", str(root))
    monkeypatch.delenv("MXMEDIA_CONFIG", raising=False)
    monkeypatch.chdir(work)
    clear_config_cache()
    yield root
    clear_config_cache()
