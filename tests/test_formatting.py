"""Tests for formatting helpers."""

from __future__ import annotations

from spliminal.utils.formatting import format_duration, shorten


class TestFormatDuration:
    def test_milliseconds(self):
        assert format_duration(500) == "500ms"

    def test_seconds(self):
        assert format_duration(2500) == "2.5s"

    def test_minutes(self):
        assert format_duration(125000) == "2m 5s"

    def test_zero(self):
        assert format_duration(0) == "0ms"


class TestShorten:
    def test_short_text_unchanged(self):
        assert shorten("ls -la") == "ls -la"

    def test_exact_length(self):
        assert shorten("a" * 10, max_len=10) == "a" * 10

    def test_long_text_cut(self):
        result = shorten("a" * 20, max_len=10)
        assert len(result) == 10
        assert result.endswith("…")
