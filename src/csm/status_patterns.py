"""
Status detection patterns and classifiers.

Claude Code advertises its state in the tmux pane title:
- "✳ <title>" when idle or waiting on the user
- a Braille spinner glyph (U+2800-U+28FF) followed by the title while working

Titles carrying the spinner are Working without further inspection. For
the rest, the captured pane text decides between Idle and Waiting.

All functions here are pure: no I/O, no tmux.
"""

from .status_constants import ActivityState

# Leading glyph of an idle/waiting Claude title
SENTINEL_GLYPH = "✳"

# Braille Patterns block, used by Claude's title spinner
SPINNER_FIRST = 0x2800
SPINNER_LAST = 0x28FF

# Claude Code's prompt character (U+276F)
PROMPT_MARKER = "❯"

# Footer shown while a permission/confirmation dialog is open
CONFIRMATION_MARKER = "Esc to cancel"


def _is_spinner_char(ch: str) -> bool:
    return SPINNER_FIRST <= ord(ch) <= SPINNER_LAST


def is_candidate_title(title: str) -> bool:
    """Check whether a pane title belongs to a Claude session."""
    if not title:
        return False
    first = title[0]
    return first == SENTINEL_GLYPH or _is_spinner_char(first)


def has_spinner_prefix(title: str) -> bool:
    """Check whether the title starts with a spinner glyph (Claude is working)."""
    return bool(title) and _is_spinner_char(title[0])


def strip_prefix(title: str) -> str:
    """Remove the leading sentinel/spinner glyph and surrounding whitespace.

    Stacked prefixes ("✳ ⠂ title") are all removed, so stripping twice
    gives the same result as stripping once. Titles without such a prefix
    are returned unchanged.
    """
    while is_candidate_title(title):
        title = title[1:].strip()
    return title


def classify_content(content: str) -> ActivityState:
    """Decide between Idle and Waiting from captured pane text.

    Only the text after the last prompt line is inspected, so an old
    confirmation dialog further up the scrollback cannot produce a match.

    Args:
        content: Captured pane text, newline separated

    Returns:
        ActivityState.WAITING if a confirmation request follows the last
        prompt line, ActivityState.IDLE otherwise
    """
    lines = content.split("\n")
    last_prompt = -1
    for i, line in enumerate(lines):
        if PROMPT_MARKER in line:
            last_prompt = i

    if 0 <= last_prompt < len(lines) - 1:
        after_prompt = "\n".join(lines[last_prompt + 1:])
        if CONFIRMATION_MARKER in after_prompt:
            return ActivityState.WAITING
    return ActivityState.IDLE
