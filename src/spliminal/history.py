"""Append-only text history backing one pane."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class PaneHistory:
    """Ordered, append-only sequence of text records.

    Entries are never removed or reordered. The only in-place edit is to the
    last entry, one character at a time, which is how the Input pane keeps its
    line-in-progress.
    """

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"PaneHistory({self._entries!r})"

    def append(self, text: str) -> None:
        self._entries.append(text)

    def ensure_entry(self) -> None:
        """Append an empty record if the history has none."""
        if not self._entries:
            self._entries.append("")

    @property
    def last(self) -> str:
        if not self._entries:
            raise IndexError("history is empty")
        return self._entries[-1]

    def push_char(self, char: str) -> None:
        """Append ``char`` to the last entry."""
        self._entries[-1] = self.last + char

    def pop_char(self) -> str | None:
        """Remove and return the trailing character of the last entry.

        Returns None when the last entry is already empty.
        """
        current = self.last
        if not current:
            return None
        self._entries[-1] = current[:-1]
        return current[-1]

    def lines(self, start: int = 1) -> Iterator[str]:
        """Yield one display string per entry, prefixed with its index.

        Multi-line entries stay one block with continuation lines indented
        under the text. A single trailing newline is not displayed. Nothing is
        cached, so this can be re-run for every frame.
        """
        width = len(str(start + len(self._entries) - 1)) if self._entries else 1
        indent = " " * (width + 2)
        for index, entry in enumerate(self._entries, start):
            head, *rest = entry.removesuffix("\n").split("\n")
            block = [f"{index:>{width}}: {head}"]
            block.extend(f"{indent}{line}" for line in rest)
            yield "\n".join(block)
