"""
Session scanner.

One scan lists every tmux pane, keeps the ones running Claude Code and
resolves each one's activity state:

1. Titles must start with the sentinel or a spinner glyph, and the
   foreground command must not be a bare shell (Claude has exited).
2. Spinner titles are Working with no further I/O.
3. Every other candidate needs a capture-pane to tell Idle from Waiting.
   Captures run in parallel, one thread per candidate, and the scan
   waits for all of them. A failed capture drops that pane from the
   result for this cycle.

The result is a Snapshot ordered by pane id.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .implementations import RealTmux
from .logging_config import get_logger
from .models import PaneRecord, Session, Snapshot
from .protocols import TmuxInterface
from .settings import CAPTURE_LINES, SHELL_COMMANDS
from .status_constants import ActivityState
from .status_patterns import (
    classify_content,
    has_spinner_prefix,
    is_candidate_title,
    strip_prefix,
)
from .tui_formatters import shorten_path

logger = get_logger("scanner")


@dataclass(frozen=True)
class Candidate:
    """A pane that looks like a live Claude session."""

    record: PaneRecord
    working: bool  # Title carries the spinner prefix


def is_claude_pane(record: PaneRecord) -> bool:
    """Check whether a pane is running Claude Code."""
    if not is_candidate_title(record.title):
        return False
    # The title lingers after Claude exits; the shell taking over gives it away
    return record.command not in SHELL_COMMANDS


def find_candidates(records: Iterable[PaneRecord]) -> List[Candidate]:
    """Filter pane records down to Claude candidates.

    The first record wins if tmux reports a pane id twice.
    """
    candidates = []
    seen = set()
    for record in records:
        if record.pane_id in seen or not is_claude_pane(record):
            continue
        seen.add(record.pane_id)
        candidates.append(Candidate(record=record, working=has_spinner_prefix(record.title)))
    return candidates


class SessionScanner:
    """Builds Snapshots of the Claude sessions visible to tmux."""

    def __init__(self, tmux: Optional[TmuxInterface] = None, capture_lines: int = CAPTURE_LINES):
        self.tmux = tmux or RealTmux()
        self.capture_lines = capture_lines

    def resolve_state(self, candidate: Candidate) -> Optional[ActivityState]:
        """Work out a candidate's state.

        Returns:
            The activity state, or None if the pane could not be captured
        """
        if candidate.working:
            return ActivityState.WORKING
        content = self.tmux.capture_pane(candidate.record.pane_id, self.capture_lines)
        if content is None:
            logger.debug("capture failed for %s, skipping", candidate.record.pane_id)
            return None
        return classify_content(content)

    def _build_session(self, candidate: Candidate) -> Optional[Session]:
        state = self.resolve_state(candidate)
        if state is None:
            return None
        record = candidate.record
        return Session(
            pane_id=record.pane_id,
            session_name=record.session_name,
            title=strip_prefix(record.title),
            path=shorten_path(record.path),
            state=state,
        )

    def scan(self) -> Snapshot:
        """Run one full scan.

        Returns:
            Sessions sorted by pane id; empty if tmux could not be queried
        """
        candidates = find_candidates(self.tmux.list_panes())
        if not candidates:
            return ()

        # map() yields results in candidate order, one slot per candidate
        with ThreadPoolExecutor(max_workers=len(candidates)) as executor:
            results = list(executor.map(self._build_session, candidates))

        sessions = sorted((s for s in results if s is not None), key=lambda s: s.pane_id)
        logger.debug("scan found %d sessions (%d candidates)", len(sessions), len(candidates))
        return tuple(sessions)
