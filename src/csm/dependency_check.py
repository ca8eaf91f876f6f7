"""
Startup checks for csm.

csm only makes sense from inside a tmux client, and needs the tmux
binary to query it.
"""

import shutil
from typing import Optional

from .exceptions import NotInTmuxError, TmuxNotFoundError
from .settings import in_tmux_session


def find_executable(name: str) -> Optional[str]:
    """Find the path to an executable.

    Args:
        name: Name of the executable

    Returns:
        Full path to executable, or None if not found
    """
    return shutil.which(name)


def require_tmux() -> str:
    """Ensure tmux is available, raise if not.

    Returns:
        Path to tmux executable

    Raises:
        TmuxNotFoundError: If tmux is not found
    """
    path = find_executable("tmux")
    if not path:
        raise TmuxNotFoundError("csm requires tmux, but it was not found on PATH.")
    return path


def require_tmux_session() -> None:
    """Ensure we are running inside a tmux client.

    Raises:
        NotInTmuxError: If the TMUX environment variable is missing
    """
    if not in_tmux_session():
        raise NotInTmuxError("csm must be run inside a tmux session.")
