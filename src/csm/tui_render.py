"""
Pure render functions for the session picker.

All functions take data and return Rich Text objects, so they can be
tested without running the Textual app.
"""

from typing import Sequence

from rich.text import Text

from .models import Session
from .status_constants import get_status_style
from .tui_formatters import max_width

TITLE_TEXT = "Claude Sessions"
EMPTY_TEXT = "No Claude sessions found"
HELP_TEXT = " ↑↓ navigate · enter switch · q quit"

POINTER = "▸"
SELECTED_ROW_STYLE = "on color(236)"
DIM_STYLE = "color(242)"
TITLE_STYLE = "color(245)"

# Width of the longest state label ("Working"/"Waiting")
LABEL_WIDTH = 7


def render_session_row(session: Session, index: int, selected: bool, name_width: int) -> Text:
    """Render one row of the session list.

    Args:
        session: Session to render
        index: 0-based position in the list (shown 1-based)
        selected: Whether the cursor is on this row
        name_width: Column width for the tmux session name

    Returns:
        Rich Text for the row
    """
    style = get_status_style(session.state)
    row = Text()
    row.append(f"  {POINTER if selected else ' '} ")
    row.append(f"{index + 1}  ")
    row.append(style.symbol, style=style.color)
    row.append(" ")
    row.append(f"{style.label:<{LABEL_WIDTH}}", style=style.color)
    row.append(f"   {session.session_name:<{name_width}}  ")
    row.append(session.title, style=TITLE_STYLE)
    if selected:
        row.stylize(SELECTED_ROW_STYLE)
    return row


def render_session_list(sessions: Sequence[Session], cursor: int) -> Text:
    """Render the whole session list, or the empty message."""
    if not sessions:
        return Text(f"  {EMPTY_TEXT}", style=DIM_STYLE)

    name_width = max_width(s.session_name for s in sessions)
    rows = [
        render_session_row(session, i, i == cursor, name_width)
        for i, session in enumerate(sessions)
    ]
    return Text("\n").join(rows)
