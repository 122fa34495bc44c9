"""Interactive session state and keystroke dispatch."""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from spliminal.focus import Focus
from spliminal.history import PaneHistory

logger = logging.getLogger(__name__)


class KeyKind(Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """A key event reduced to what dispatch needs.

    ``key`` uses Textual's key names (``"tab"``, ``"shift+tab"``,
    ``"enter"``, ``"backspace"``, ``"escape"``, ``"a"``, ...).
    ``character`` is set only for printable input.
    """

    key: str
    character: str | None = None
    kind: KeyKind = KeyKind.PRESS

    @classmethod
    def char(cls, character: str) -> KeyEvent:
        return cls(key=character, character=character)


class Effect(Enum):
    """What the run loop must do after a key was dispatched."""

    NONE = "none"
    EXIT = "exit"
    SUBMIT = "submit"
    CANCEL = "cancel"


@dataclass
class Session:
    focus: Focus = Focus.NONE
    input: PaneHistory = field(default_factory=PaneHistory)
    output: PaneHistory = field(default_factory=PaneHistory)
    error: PaneHistory = field(default_factory=PaneHistory)
    exit: bool = False
    pending: deque[str] = field(default_factory=deque)
    running: str | None = None
    running_since: float = 0.0

    def handle_key(self, event: KeyEvent) -> Effect:
        """Dispatch one key event.

        Every press lands in exactly one of: exit, focus change, editing the
        input line, command submission, cancelling the running command, or
        nothing at all.
        """
        if event.kind is not KeyKind.PRESS:
            return Effect.NONE

        if event.key == "tab":
            self.focus = self.focus.next()
            return Effect.NONE
        if event.key == "shift+tab":
            self.focus = self.focus.prev()
            return Effect.NONE
        if event.key == "escape" and self.running is not None:
            return Effect.CANCEL

        if self.focus is Focus.NONE:
            if event.character == "q":
                self.exit = True
                return Effect.EXIT
            return Effect.NONE

        if self.focus is not Focus.INPUT:
            return Effect.NONE

        if event.key == "enter":
            return self._submit()
        if event.key == "backspace":
            if len(self.input):
                self.input.pop_char()
            return Effect.NONE
        if event.character:
            self.input.ensure_entry()
            self.input.push_char(event.character)
        return Effect.NONE

    def _submit(self) -> Effect:
        command = self.input.last.strip() if len(self.input) else ""
        self.input.append("")
        if not command:
            return Effect.NONE
        logger.debug("Queued command: %s", command)
        self.pending.append(command)
        return Effect.SUBMIT

    @property
    def busy(self) -> bool:
        return self.running is not None

    def start_next(self) -> str | None:
        """Move the oldest queued command to running, if idle."""
        if self.running is not None or not self.pending:
            return None
        self.running = self.pending.popleft()
        self.running_since = time.monotonic()
        return self.running

    def finish(self) -> None:
        self.running = None
        self.running_since = 0.0
