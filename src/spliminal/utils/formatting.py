"""Text formatting helpers for the pane views."""

from __future__ import annotations

MAX_COMMAND_PREVIEW = 40


def format_duration(ms: int) -> str:
    """Format milliseconds to human-readable duration."""
    if ms < 1000:
        return f"{ms}ms"
    elif ms < 60000:
        return f"{ms / 1000:.1f}s"
    else:
        minutes = ms // 60000
        seconds = (ms % 60000) // 1000
        return f"{minutes}m {seconds}s"


def shorten(text: str, max_len: int = MAX_COMMAND_PREVIEW) -> str:
    """Cut ``text`` to ``max_len`` characters, marking the cut with an ellipsis."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 1] + "…"
