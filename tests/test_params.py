"""Tests for URL query parameter extraction and timestamp parsing."""

from __future__ import annotations

import pytest

from mxmedia.parsing.params import (
    extract_query_params,
    extract_start_time,
    parse_timestamp,
    remove_query_params,
    start_time_params,
    strip_tracking_params,
)


class TestExtractQueryParams:
    """Tests for extract_query_params()."""

    def test_youtube_timestamp(self):
        result = extract_query_params("v=abc&list=PLxxx&t=120", "youtube")
        assert result == {"start_time": "120"}

    def test_youtube_t_takes_precedence_over_start(self):
        """When both t= and start= are present, t= wins (listed first in mapping)."""
        result = extract_query_params("v=abc&t=60&start=120", "youtube")
        assert result["start_time"] == "60"

    def test_bilibili_part_and_time(self):
        result = extract_query_params("p=2&t=30", "bilibili")
        assert result == {"part": "2", "start_time": "30"}

    def test_vimeo_private_hash(self):
        assert extract_query_params("h=abc123", "vimeo") == {"private_hash": "abc123"}

    def test_unknown_provider_no_params(self):
        assert extract_query_params("t=30", "unknown") == {}

    def test_case_insensitive_provider(self):
        assert extract_query_params("t=30", "YouTube") == {"start_time": "30"}


class TestExtractStartTime:
    def test_compact_value(self):
        assert extract_start_time("v=abc&t=1m30s", "youtube") == 90.0

    def test_missing(self):
        assert extract_start_time("v=abc", "youtube") is None

    def test_unparseable(self):
        assert extract_start_time("t=soon", "youtube") is None


class TestStartTimeParams:
    @pytest.mark.parametrize(
        ("provider", "expected"),
        [
            ("youtube", ["t", "start"]),
            ("bilibili", ["t"]),
            ("vimeo", ["time"]),
            ("generic", []),
        ],
    )
    def test_start_time_params(self, provider, expected):
        assert start_time_params(provider) == expected

    def test_remove_query_params(self):
        assert remove_query_params("v=abc&t=30&start=5&list=x", ["t", "start"]) == "v=abc&list=x"

    def test_remove_nothing(self):
        assert remove_query_params("v=abc&t=30", []) == "v=abc&t=30"
        assert remove_query_params("", ["t"]) == ""


class TestStripTrackingParams:
    def test_removes_tracking(self):
        query = "a=1&utm_source=x&fbclid=y&b=2&UTM_Medium=z"
        assert strip_tracking_params(query) == "a=1&b=2"

    def test_keeps_encoding_and_order(self):
        assert strip_tracking_params("q=a%20b&gclid=1&p=2") == "q=a%20b&p=2"

    def test_empty(self):
        assert strip_tracking_params("") == ""


class TestParseTimestamp:
    """Tests for parse_timestamp()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("120", 120.0),
            ("30.5", 30.5),
            ("45s", 45.0),
            ("2m30s", 150.0),
            ("1h2m3s", 3723.0),
            ("1h", 3600.0),
            ("2:30", 150.0),
            ("1:02:05", 3725.0),
            ("2:30.5", 150.5),
            ("  90 ", 90.0),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_timestamp(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "-5", "1:-3", "1:xx", "nan", "inf", "1:2:3:4"])
    def test_invalid(self, value):
        assert parse_timestamp(value) is None
