"""
Real implementations of protocol interfaces.

RealTmux runs raw tmux commands through libtmux's Server.cmd, which
takes care of locating the tmux binary and the socket flags.
"""

from typing import List, Optional

import libtmux
from libtmux.exc import LibTmuxException

from .logging_config import get_logger
from .models import PaneRecord
from .settings import CAPTURE_LINES, LIST_PANES_FORMAT, get_tmux_socket

logger = get_logger("tmux")


def parse_pane_line(line: str) -> Optional[PaneRecord]:
    """Parse one tab-separated list-panes line.

    Returns:
        PaneRecord, or None for blank lines and lines with fewer than four fields
    """
    if not line:
        return None
    parts = line.split("\t", 3)
    if len(parts) < 4:
        return None
    pane_id, path, title, command = parts
    return PaneRecord(
        pane_id=pane_id,
        session_name=pane_id.split(":", 1)[0],
        path=path,
        title=title,
        command=command,
    )


def parse_pane_list(lines: List[str]) -> List[PaneRecord]:
    """Parse list-panes output, dropping malformed lines."""
    records = []
    for line in lines:
        record = parse_pane_line(line)
        if record is not None:
            records.append(record)
    return records


class RealTmux:
    """Production implementation of TmuxInterface using libtmux."""

    def __init__(self, socket_name: Optional[str] = None):
        """Initialize with optional socket name for test isolation.

        If no socket_name is provided, checks CSM_TMUX_SOCKET env var.
        Otherwise tmux picks the server of the client we run in.
        """
        self._socket_name = socket_name or get_tmux_socket()
        self._server: Optional[libtmux.Server] = None

    @property
    def server(self) -> libtmux.Server:
        """Lazy-load the tmux server connection."""
        if self._server is None:
            if self._socket_name:
                self._server = libtmux.Server(socket_name=self._socket_name)
            else:
                self._server = libtmux.Server()
        return self._server

    def _run(self, *args: str) -> Optional[List[str]]:
        """Run a tmux command, returning stdout lines or None on failure."""
        try:
            result = self.server.cmd(*args)
        except (LibTmuxException, OSError) as e:
            logger.debug("tmux %s failed: %s", args[0], e)
            return None
        if result.returncode != 0:
            logger.debug(
                "tmux %s exited %s: %s", args[0], result.returncode, " ".join(result.stderr)
            )
            return None
        return result.stdout

    def list_panes(self) -> List[PaneRecord]:
        lines = self._run("list-panes", "-a", "-F", LIST_PANES_FORMAT)
        if lines is None:
            return []
        return parse_pane_list(lines)

    def capture_pane(self, pane_id: str, lines: int = CAPTURE_LINES) -> Optional[str]:
        captured = self._run("capture-pane", "-t", pane_id, "-p", "-S", f"-{lines}")
        if captured is None:
            return None
        return "\n".join(captured)

    def activate(self, pane_id: str) -> bool:
        return self._run("switch-client", "-t", pane_id) is not None
