"""
Textual TUI for picking a Claude session.

The app rescans tmux every second on a worker thread and posts each
snapshot back as a SessionsScanned message, so key handling never waits
on tmux. The app's return value is the selected pane id, or None.
"""

import os
import sys
from typing import Optional

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Static

from .logging_config import get_logger
from .models import Snapshot
from .protocols import TmuxInterface
from .scanner import SessionScanner
from .settings import REFRESH_INTERVAL
from .tui_logic import SessionModel
from .tui_render import HELP_TEXT, TITLE_TEXT, render_session_list

logger = get_logger("tui")


class SessionsScanned(Message):
    """A scan finished on the worker thread."""

    def __init__(self, sessions: Snapshot) -> None:
        super().__init__()
        self.sessions = sessions


class SessionPickerTUI(App[Optional[str]]):
    """csm session picker"""

    CSS_PATH = "tui.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=False),
        Binding("escape", "quit", "Quit", show=False, priority=True),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        Binding("j", "cursor_down", "Next", show=False),
        Binding("down", "cursor_down", "Next", show=False),
        Binding("k", "cursor_up", "Prev", show=False),
        Binding("up", "cursor_up", "Prev", show=False),
        Binding("enter", "select_current", "Switch", show=False),
    ] + [
        Binding(str(n), f"quick_select({n})", f"Switch to {n}", show=False)
        for n in range(1, 10)
    ]

    def __init__(self, tmux: Optional[TmuxInterface] = None, scan_on_mount: bool = True):
        super().__init__()
        self.scanner = SessionScanner(tmux)
        self.model = SessionModel()
        # Tests drive snapshots by hand instead of scanning
        self.scan_on_mount = scan_on_mount
        # At most one scan in flight; cleared when its result is applied
        self._scan_in_progress = False

    def compose(self) -> ComposeResult:
        yield Static(TITLE_TEXT, id="title")
        yield Static(id="session-list")
        yield Static(HELP_TEXT, id="help-text")

    def on_mount(self) -> None:
        self._render_sessions()
        if self.scan_on_mount:
            self.refresh_sessions()
            self.set_interval(REFRESH_INTERVAL, self.refresh_sessions)

    def refresh_sessions(self) -> None:
        """Start a scan unless one is still running."""
        if self._scan_in_progress:
            return
        self._scan_in_progress = True
        self._scan_async()

    @work(thread=True, exclusive=True, group="scan")
    def _scan_async(self) -> None:
        """Scan tmux off the main thread, then hand the snapshot to the UI."""
        sessions = self.scanner.scan()
        self.post_message(SessionsScanned(sessions))

    def on_sessions_scanned(self, message: SessionsScanned) -> None:
        self._scan_in_progress = False
        self.model.apply_snapshot(message.sessions)
        self._render_sessions()

    def _render_sessions(self) -> None:
        session_list = self.query_one("#session-list", Static)
        session_list.update(render_session_list(self.model.sessions, self.model.cursor))

    def action_cursor_down(self) -> None:
        self.model.move_down()
        self._render_sessions()

    def action_cursor_up(self) -> None:
        self.model.move_up()
        self._render_sessions()

    def action_select_current(self) -> None:
        if self.model.confirm():
            self.exit(self.model.selected_pane_id)

    def action_quick_select(self, number: int) -> None:
        if self.model.quick_select(number):
            self.exit(self.model.selected_pane_id)

    async def action_quit(self) -> None:
        self.model.quit()
        self.exit(None)


def run_tui(tmux: Optional[TmuxInterface] = None) -> Optional[str]:
    """Run the picker and return the selected pane id, if any."""
    # Ensure we're using a proper terminal
    if not sys.stdout.isatty():
        print("Error: Must run in a TTY terminal", file=sys.stderr)
        sys.exit(1)

    # Force terminal size detection
    os.environ.setdefault('TERM', 'xterm-256color')

    app = SessionPickerTUI(tmux)
    selected = app.run()
    logger.debug("picker exited, selected=%s", selected)
    return selected
