"""
Protocol definitions for external dependencies.

The scanner talks to tmux only through TmuxInterface, so tests can swap
the libtmux-backed implementation for a fake.
"""

from typing import List, Optional, Protocol, runtime_checkable

from .models import PaneRecord


@runtime_checkable
class TmuxInterface(Protocol):
    """Interface for the tmux queries and actions csm needs"""

    def list_panes(self) -> List[PaneRecord]:
        """List every pane across every tmux session.

        Returns:
            Parsed pane records, or an empty list if the query failed
        """
        ...

    def capture_pane(self, pane_id: str, lines: int = 50) -> Optional[str]:
        """Capture the last N lines of a pane.

        Args:
            pane_id: composite "session:window.pane" target
            lines: number of lines to capture from scrollback

        Returns:
            Pane content as string, or None on failure
        """
        ...

    def activate(self, pane_id: str) -> bool:
        """Switch the current tmux client to a pane.

        Returns:
            True if tmux accepted the switch, False otherwise
        """
        ...
