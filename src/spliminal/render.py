"""Derive what each pane shows from session state.

Nothing here holds state: the UI calls :func:`pane_views` after every change
and draws whatever comes back.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

from spliminal.focus import Focus
from spliminal.session import Session
from spliminal.utils.formatting import format_duration, shorten

CURSOR = "█"

# pane -> (title, title alignment)
PANE_TITLES: dict[Focus, tuple[str, str]] = {
    Focus.INPUT: ("input", "left"),
    Focus.OUTPUT: ("output", "right"),
    Focus.ERROR: ("error", "center"),
}


@dataclass(frozen=True)
class PaneView:
    pane: Focus
    title: str
    align: str
    focused: bool
    body: str
    subtitle: str = ""


def frame_title(name: str) -> str:
    return f"[b]{name}[/b]"


def running_status(session: Session, now: float | None = None) -> str:
    if session.running is None:
        return ""
    now = time.monotonic() if now is None else now
    elapsed = format_duration(int((now - session.running_since) * 1000))
    return f"running: {shorten(session.running)} ({elapsed})"


def _body(session: Session, pane: Focus) -> str:
    history = {Focus.INPUT: session.input, Focus.OUTPUT: session.output, Focus.ERROR: session.error}[pane]
    body = "\n".join(history.lines())
    if pane is Focus.INPUT and session.focus is Focus.INPUT:
        body = body + CURSOR if body else f"1: {CURSOR}"
    return body


def pane_views(session: Session, now: float | None = None) -> tuple[PaneView, ...]:
    """Return the Input, Output and Error views, in that order."""
    status = running_status(session, now)
    queued = f"{len(session.pending)} queued" if session.pending else ""
    subtitles = {Focus.INPUT: queued, Focus.OUTPUT: status, Focus.ERROR: status}

    views: list[PaneView] = []
    for pane, (title, align) in PANE_TITLES.items():
        views.append(
            PaneView(
                pane=pane,
                title=title,
                align=align,
                focused=session.focus is pane,
                body=_body(session, pane),
                subtitle=subtitles[pane],
            )
        )
    return tuple(views)
