"""
Pure business logic for the session picker.

SessionModel holds the latest snapshot, the cursor and the pending
selection. It knows nothing about Textual, so every transition can be
unit tested directly.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .models import Session, Snapshot


def find_pane_index(sessions: Sequence[Session], pane_id: str) -> Optional[int]:
    """Index of the session with the given pane id, or None."""
    for i, session in enumerate(sessions):
        if session.pane_id == pane_id:
            return i
    return None


def reconcile_cursor(
    old_sessions: Sequence[Session],
    cursor: int,
    new_sessions: Sequence[Session],
) -> int:
    """Work out where the cursor goes after a refresh.

    The cursor follows the pane it was on, wherever that pane moved to.
    If the pane is gone, the index is kept and clamped to the new list.

    Returns:
        Index into new_sessions, or 0 if it is empty
    """
    if 0 <= cursor < len(old_sessions):
        index = find_pane_index(new_sessions, old_sessions[cursor].pane_id)
        if index is not None:
            return index
    if cursor >= len(new_sessions):
        return max(0, len(new_sessions) - 1)
    return cursor


@dataclass
class SessionModel:
    """State behind the picker: snapshot, cursor and selection."""

    sessions: Snapshot = ()
    cursor: int = 0
    quitting: bool = False
    selected_pane_id: Optional[str] = None

    @property
    def current(self) -> Optional[Session]:
        """The session under the cursor."""
        if 0 <= self.cursor < len(self.sessions):
            return self.sessions[self.cursor]
        return None

    def apply_snapshot(self, sessions: Snapshot) -> None:
        new_sessions = tuple(sessions)
        self.cursor = reconcile_cursor(self.sessions, self.cursor, new_sessions)
        self.sessions = new_sessions

    def move_down(self) -> None:
        if self.sessions:
            self.cursor = (self.cursor + 1) % len(self.sessions)

    def move_up(self) -> None:
        if self.sessions:
            self.cursor = (self.cursor - 1) % len(self.sessions)

    def quick_select(self, number: int) -> bool:
        """Select the session shown as `number` (1-based).

        Returns:
            True if a session was selected and the picker should exit
        """
        index = number - 1
        if not 0 <= index < len(self.sessions):
            return False
        self._select(self.sessions[index])
        return True

    def confirm(self) -> bool:
        """Select the session under the cursor.

        Returns:
            True if a session was selected and the picker should exit
        """
        session = self.current
        if session is None:
            return False
        self._select(session)
        return True

    def quit(self) -> None:
        """Exit without selecting anything."""
        self.quitting = True
        self.selected_pane_id = None

    def _select(self, session: Session) -> None:
        self.quitting = True
        self.selected_pane_id = session.pane_id
