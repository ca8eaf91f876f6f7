"""
Exceptions raised by csm.

Only startup problems are raised. Failures while querying tmux during a
scan are absorbed by the adapter and show up as fewer sessions.
"""


class CsmError(Exception):
    """Base class for csm errors."""


class TmuxNotFoundError(CsmError):
    """The tmux executable is not on PATH."""


class NotInTmuxError(CsmError):
    """csm was started outside a tmux session."""
