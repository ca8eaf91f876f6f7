"""
Data records passed between the tmux adapter, the scanner and the TUI.
"""

from dataclasses import dataclass
from typing import Tuple

from .status_constants import ActivityState


@dataclass(frozen=True)
class PaneRecord:
    """One line of `tmux list-panes -a` output.

    pane_id is the composite "session:window.pane" target.
    """

    pane_id: str
    session_name: str
    path: str
    title: str
    command: str


@dataclass(frozen=True)
class Session:
    """A Claude session as shown in the picker."""

    pane_id: str
    session_name: str
    title: str  # Prefix-stripped pane title
    path: str  # Home directory shortened to ~
    state: ActivityState


# Result of one scan: sessions ordered by pane_id, unique pane ids
Snapshot = Tuple[Session, ...]
