"""Refuse editors that need a real terminal."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

INTERACTIVE_PATTERNS: list[tuple[str, str]] = [
    (r"^(vi|vim|nvim|nano|emacs|pico)\b", "Full-screen editors are not supported"),
]


class InteractiveGuard:
    """Regex-based check for full-screen editors."""

    def __init__(self, patterns: list[tuple[str, str]] | None = None) -> None:
        self._patterns: list[tuple[re.Pattern[str], str]] = []
        for pattern, reason in patterns or INTERACTIVE_PATTERNS:
            try:
                self._patterns.append((re.compile(pattern), reason))
            except re.error:
                logger.error("Invalid guard pattern: %s", pattern)

    def check(self, command: str) -> tuple[bool, str]:
        """Check if a command must be refused. Returns (blocked, reason)."""
        for compiled, reason in self._patterns:
            if compiled.search(command.strip()):
                logger.warning("Blocked command: %s (reason: %s)", command, reason)
                return True, reason
        return False, ""


interactive_guard = InteractiveGuard()
