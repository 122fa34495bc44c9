"""Full-screen Textual front-end over a :class:`~spliminal.session.Session`."""

from __future__ import annotations

import logging

from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Key
from textual.widgets import Static
from textual.worker import Worker

from spliminal.config import AppConfig
from spliminal.executor import CommandExecutor
from spliminal.focus import Focus
from spliminal.render import PaneView, frame_title, pane_views
from spliminal.services.shell import ShellRunner
from spliminal.session import Effect, KeyEvent, Session

logger = logging.getLogger(__name__)

TICK_SECONDS = 0.25


class PaneWidget(VerticalScroll):
    """One bordered, scrollable pane. Shows whatever view it is given."""

    can_focus = False

    def __init__(self, pane: Focus) -> None:
        super().__init__(id=pane.value)
        self.pane = pane
        self.body = Static(classes="body")

    def compose(self) -> ComposeResult:
        yield self.body

    def show(self, view: PaneView) -> None:
        self.border_title = view.title
        self.border_subtitle = escape(view.subtitle)
        self.set_class(view.focused, "focused")
        self.body.update(Text(view.body))
        self.scroll_end(animate=False)


class SpliminalApp(App, inherit_bindings=False):
    CSS = """
    #frame {
        border: heavy $foreground;
        border-title-align: center;
        height: 1fr;
    }

    #main {
        height: 5fr;
    }

    #main PaneWidget {
        width: 1fr;
        height: 1fr;
    }

    PaneWidget {
        border: round $panel-lighten-2;
        padding: 0 1;
    }

    PaneWidget.focused {
        border: round $accent;
    }

    #input {
        border-title-align: left;
    }

    #output {
        border-title-align: right;
    }

    #error {
        height: 1fr;
        border-title-align: center;
    }
    """

    BINDINGS = [
        Binding("tab", "send_key('tab')", "Next Pane", show=False, priority=True),
        Binding("shift+tab", "send_key('shift+tab')", "Prev Pane", show=False, priority=True),
    ]

    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        config: AppConfig | None = None,
        executor: CommandExecutor | None = None,
    ) -> None:
        super().__init__()
        self.app_config = config or AppConfig()
        self.executor = executor or CommandExecutor(ShellRunner(self.app_config))
        self.session = Session()
        self._worker: Worker[None] | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="frame"):
            with Horizontal(id="main"):
                yield PaneWidget(Focus.INPUT)
                yield PaneWidget(Focus.OUTPUT)
            yield PaneWidget(Focus.ERROR)

    def on_mount(self) -> None:
        self.query_one("#frame", Vertical).border_title = frame_title(escape(self.app_config.ui.title))
        self.set_interval(TICK_SECONDS, self._tick)
        self.refresh_panes()

    def on_key(self, event: Key) -> None:
        self.send_key(KeyEvent(key=event.key, character=event.character if event.is_printable else None))
        event.prevent_default()
        event.stop()

    def action_send_key(self, key: str) -> None:
        self.send_key(KeyEvent(key=key))

    def send_key(self, event: KeyEvent) -> None:
        effect = self.session.handle_key(event)
        if effect is Effect.EXIT:
            self.exit()
            return
        if effect is Effect.SUBMIT:
            self._start_next()
        elif effect is Effect.CANCEL:
            self._cancel_running()
        self.refresh_panes()

    def refresh_panes(self) -> None:
        panes = {widget.pane: widget for widget in self.query(PaneWidget)}
        for view in pane_views(self.session):
            if view.pane in panes:
                panes[view.pane].show(view)

    def _tick(self) -> None:
        if self.session.busy:
            self.refresh_panes()

    def _start_next(self) -> None:
        command = self.session.start_next()
        if command is None:
            return
        logger.info("Starting: %s", command)
        self._worker = self.run_worker(self._run(command), name=command, group="shell")

    def _cancel_running(self) -> None:
        if self._worker is not None:
            self._worker.cancel()

    async def _run(self, command: str) -> None:
        try:
            await self.executor.execute(command, self.session.output, self.session.error)
        finally:
            self.session.finish()
            self._worker = None
            if self.is_running and not self.session.exit:
                self.refresh_panes()
                self._start_next()
