"""Which pane currently owns keyboard input."""

from __future__ import annotations

from enum import Enum


class Focus(Enum):
    """Focus states in cycling order.

    ``NONE`` is "command mode": no pane is focused and only the global
    bindings apply.
    """

    INPUT = "input"
    OUTPUT = "output"
    ERROR = "error"
    NONE = "none"

    def next(self) -> Focus:
        """Return the state after this one (Input -> Output -> Error -> None -> Input)."""
        members = list(Focus)
        return members[(members.index(self) + 1) % len(members)]

    def prev(self) -> Focus:
        """Return the state before this one; the inverse of :meth:`next`."""
        members = list(Focus)
        return members[(members.index(self) - 1) % len(members)]
