"""
Status constants and mappings for csm.

Centralizes the activity states and how each one is displayed.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple


# =============================================================================
# Activity States
# =============================================================================

class ActivityState(str, Enum):
    """What a Claude session is doing right now."""

    IDLE = "idle"
    WAITING = "waiting"  # Blocked on a confirmation prompt
    WORKING = "working"  # Spinner in the pane title


# =============================================================================
# Display Descriptors
# =============================================================================

class StatusStyle(NamedTuple):
    """How a state is drawn in the session list."""

    symbol: str
    label: str
    color: str


STATUS_STYLES: Mapping[ActivityState, StatusStyle] = MappingProxyType({
    ActivityState.WORKING: StatusStyle("●", "Working", "color(76)"),   # green
    ActivityState.WAITING: StatusStyle("◐", "Waiting", "color(214)"),  # amber
    ActivityState.IDLE: StatusStyle("○", "Idle", "color(242)"),        # grey
})


def get_status_style(state: ActivityState) -> StatusStyle:
    """Get the display descriptor for an activity state."""
    return STATUS_STYLES[state]
