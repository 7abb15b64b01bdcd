"""Tests for MediaResolver and timestamp links."""

import pytest

from mxmedia.config.loader import ConfigSource, MxConfig
from mxmedia.hosts import MediaHost
from mxmedia.models.media_url import MediaURL
from mxmedia.resolver import MediaResolver
from mxmedia.timestamp import timestamp_link

YOUTUBE = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


@pytest.fixture
def resolver(tmp_path):
    config = MxConfig(
        root_dir=tmp_path,
        source=ConfigSource.USER,
        url_mapping={"lectures": "/mnt/lectures"},
        timestamp_offset=-2,
    )
    return MediaResolver(config)


class TestMediaResolver:
    def test_resolve_mx(self, resolver):
        url = resolver.resolve("mx://lectures/week1/intro.mp4")
        assert url.href == "file:///mnt/lectures/week1/intro.mp4"

    def test_resolve_web(self, resolver):
        assert resolver.resolve("https://youtu.be/dQw4w9WgXcQ").type == MediaHost.YOUTUBE

    @pytest.mark.parametrize(
        "raw", [None, "not a url", "ftp://example.com/a.mp4", "mx://unknown/a.mp4"]
    )
    def test_resolve_failures(self, resolver, raw):
        assert resolver.resolve(raw) is None

    def test_suggest(self, resolver):
        [url] = resolver.suggest("mx://lectures/a.mp3")
        assert url.href == "file:///mnt/lectures/a.mp3"

    def test_from_file(self, resolver):
        url = resolver.from_file("a.mp4", lambda f: "app://local//vault/a.mp4?123")
        assert url.href == "file:///vault/a.mp4"

    def test_defaults_to_loaded_config(self):
        assert MediaResolver().settings.url_mapping == {}

    def test_timestamp_link_applies_offset(self, resolver):
        url = MediaURL.create(YOUTUBE)
        assert resolver.timestamp_link(url, 65) == f"[1:03]({YOUTUBE}#t=63)"


class TestTimestampLink:
    def test_basic(self):
        url = MediaURL.create(YOUTUBE)
        assert timestamp_link(url, 3725) == f"[1:02:05]({YOUTUBE}#t=3725)"

    def test_zero_has_no_fragment(self):
        url = MediaURL.create(YOUTUBE + "#t=10")
        assert timestamp_link(url, 0) == f"[0:00]({YOUTUBE})"

    def test_zero_clears_query_start_time(self):
        url = MediaURL.create(YOUTUBE + "&t=30")
        assert timestamp_link(url, 0) == f"[0:00]({YOUTUBE})"
        assert timestamp_link(url, 45) == f"[0:45]({YOUTUBE}#t=45)"

    def test_negative_clamped(self):
        url = MediaURL.create(YOUTUBE)
        assert timestamp_link(url, 1, offset=-5) == f"[0:00]({YOUTUBE})"

    def test_clamped_to_duration(self):
        url = MediaURL.create(YOUTUBE)
        assert timestamp_link(url, 100, duration=80) == f"[1:20]({YOUTUBE}#t=80)"

    def test_keeps_other_hash_content(self):
        url = MediaURL.create("file:///a.mp4#autoplay")
        assert timestamp_link(url, 5.5) == "[0:05](file:///a.mp4#autoplay&t=5.5)"
