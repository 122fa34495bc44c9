"""Tests for pane history."""

from __future__ import annotations

import pytest

from spliminal.history import PaneHistory


class TestPaneHistory:
    def test_starts_empty(self):
        history = PaneHistory()
        assert len(history) == 0
        assert list(history.lines()) == []

    def test_append_keeps_order(self):
        history = PaneHistory()
        history.append("a")
        history.append("b")
        assert list(history) == ["a", "b"]
        assert history[0] == "a"
        assert history.last == "b"

    def test_last_on_empty_raises(self):
        with pytest.raises(IndexError):
            PaneHistory().last

    def test_ensure_entry_only_when_empty(self):
        history = PaneHistory()
        history.ensure_entry()
        history.ensure_entry()
        assert list(history) == [""]

    def test_push_and_pop_edit_last_entry(self):
        history = PaneHistory(["done", ""])
        history.push_char("l")
        history.push_char("s")
        assert history.pop_char() == "s"
        assert list(history) == ["done", "l"]

    def test_pop_on_empty_entry(self):
        history = PaneHistory([""])
        assert history.pop_char() is None
        assert list(history) == [""]


class TestLines:
    def test_numbered_from_one(self):
        history = PaneHistory(["ls", "pwd"])
        assert list(history.lines()) == ["1: ls", "2: pwd"]

    def test_custom_start(self):
        history = PaneHistory(["ls"])
        assert list(history.lines(start=0)) == ["0: ls"]

    def test_trailing_newline_hidden(self):
        history = PaneHistory(["hi\n"])
        assert list(history.lines()) == ["1: hi"]
        assert history[0] == "hi\n"

    def test_multiline_entry_is_one_block(self):
        history = PaneHistory(["a\nb\n"])
        assert list(history.lines()) == ["1: a\n   b"]

    def test_numbers_right_aligned(self):
        history = PaneHistory([str(i) for i in range(10)])
        lines = list(history.lines())
        assert lines[0] == " 1: 0"
        assert lines[-1] == "10: 9"

    def test_restartable(self):
        history = PaneHistory(["x"])
        assert list(history.lines()) == list(history.lines())
