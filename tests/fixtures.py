"""
Test fixtures and factories for csm unit tests.

This module provides a fake tmux and factory functions for test data
without requiring a tmux server.
"""

import threading
from typing import Dict, List, Optional

from csm.models import PaneRecord, Session
from csm.status_constants import ActivityState

SPINNER_TITLE_PREFIX = "⠂ "
SENTINEL_TITLE_PREFIX = "✳ "

IDLE_CONTENT = "some output\n❯ \n"
WAITING_CONTENT = (
    "Bash command\n"
    "❯ run the tests\n"
    "Do you want to proceed?\n"
    "❯ 1. Yes\n"
    "  2. No\n"
    "Esc to cancel\n"
)


def create_pane(
    pane_id: str = "work:1.0",
    title: str = "✳ Claude Code",
    command: str = "claude",
    path: str = "/tmp/project",
) -> PaneRecord:
    """Create a PaneRecord as the tmux adapter would."""
    return PaneRecord(
        pane_id=pane_id,
        session_name=pane_id.split(":", 1)[0],
        path=path,
        title=title,
        command=command,
    )


def create_session(
    pane_id: str = "work:1.0",
    state: ActivityState = ActivityState.IDLE,
    title: str = "Claude Code",
    path: str = "~/project",
) -> Session:
    """Create a Session as the scanner would."""
    return Session(
        pane_id=pane_id,
        session_name=pane_id.split(":", 1)[0],
        title=title,
        path=path,
        state=state,
    )


class FakeTmux:
    """In-memory TmuxInterface that records every call.

    Args:
        panes: Records returned by list_panes
        contents: pane_id -> captured text; missing panes fail to capture
    """

    def __init__(self, panes: Optional[List[PaneRecord]] = None,
                 contents: Optional[Dict[str, str]] = None):
        self.panes = list(panes or [])
        self.contents = dict(contents or {})
        self.capture_calls: List[str] = []
        self.activate_calls: List[str] = []
        self._lock = threading.Lock()

    def list_panes(self) -> List[PaneRecord]:
        return list(self.panes)

    def capture_pane(self, pane_id: str, lines: int = 50) -> Optional[str]:
        with self._lock:
            self.capture_calls.append(pane_id)
        return self.contents.get(pane_id)

    def activate(self, pane_id: str) -> bool:
        self.activate_calls.append(pane_id)
        return True
