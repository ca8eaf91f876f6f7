"""
Fixed settings for csm.

csm has no configuration file. Everything tunable lives here as a
module-level constant so the scanner, TUI and CLI agree on one value.
"""

import os
from typing import FrozenSet, Optional

# Environment variable tmux sets inside every attached client
TMUX_ENV_VAR = "TMUX"

# Socket override used by tests to talk to an isolated tmux server
TMUX_SOCKET_ENV_VAR = "CSM_TMUX_SOCKET"

# Seconds between scans
REFRESH_INTERVAL = 1.0

# Scrollback depth passed to capture-pane (-S -N)
CAPTURE_LINES = 50

# One line per pane: composite id, cwd, title, foreground command
LIST_PANES_FORMAT = (
    "#{session_name}:#{window_index}.#{pane_index}"
    "\t#{pane_current_path}"
    "\t#{pane_title}"
    "\t#{pane_current_command}"
)

# Foreground commands that mean Claude exited and the shell took over
SHELL_COMMANDS: FrozenSet[str] = frozenset({"zsh", "bash", "fish", "sh", "dash"})


def get_tmux_socket() -> Optional[str]:
    """Socket name for an isolated tmux server, or None for the default."""
    return os.environ.get(TMUX_SOCKET_ENV_VAR) or None


def in_tmux_session() -> bool:
    """Check whether this process runs inside a tmux client."""
    return bool(os.environ.get(TMUX_ENV_VAR))
