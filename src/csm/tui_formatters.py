"""
Pure formatting functions for display.

These functions convert raw values into the strings shown in the
session list. They have no domain logic.
"""

from pathlib import Path
from typing import Iterable, Optional


def shorten_path(path: str, home: Optional[str] = None) -> str:
    """Replace the home directory prefix with "~".

    Args:
        path: Absolute path as reported by tmux
        home: Home directory (defaults to the current user's)

    Returns:
        Shortened path, or the input unchanged if it is outside home or
        the home directory cannot be determined
    """
    if home is None:
        try:
            home = str(Path.home())
        except RuntimeError:
            return path
    if home and path.startswith(home):
        return "~" + path[len(home):]
    return path


def max_width(values: Iterable[str]) -> int:
    """Width of the longest string, 0 for an empty iterable."""
    return max((len(v) for v in values), default=0)
