"""
Unit tests for title and content classification.
"""

import pytest

from csm.status_constants import ActivityState
from csm.status_patterns import (
    classify_content,
    has_spinner_prefix,
    is_candidate_title,
    strip_prefix,
)


class TestIsCandidateTitle:
    """Test is_candidate_title"""

    def test_empty_title_is_not_candidate(self):
        assert is_candidate_title("") is False

    def test_sentinel_prefix(self):
        assert is_candidate_title("✳ Claude Code") is True

    @pytest.mark.parametrize("glyph", ["⠀", "⠂", "⠐", "⣿"])
    def test_spinner_range_bounds(self, glyph):
        assert is_candidate_title(f"{glyph} Fixing tests") is True

    @pytest.mark.parametrize("glyph", ["⟿", "⤀"])
    def test_just_outside_spinner_range(self, glyph):
        assert is_candidate_title(f"{glyph} title") is False

    @pytest.mark.parametrize("title", ["bash", "vim main.py", " ✳ leading space", "✶ other star"])
    def test_other_titles(self, title):
        assert is_candidate_title(title) is False


class TestHasSpinnerPrefix:
    """Test has_spinner_prefix"""

    def test_spinner(self):
        assert has_spinner_prefix("⠂ Working on it") is True

    def test_sentinel_is_not_spinner(self):
        assert has_spinner_prefix("✳ Claude Code") is False

    def test_empty(self):
        assert has_spinner_prefix("") is False

    def test_spinner_titles_are_candidates(self):
        for code in range(0x2800, 0x2900):
            title = chr(code) + " x"
            assert has_spinner_prefix(title)
            assert is_candidate_title(title)


class TestStripPrefix:
    """Test strip_prefix"""

    def test_strips_sentinel_and_space(self):
        assert strip_prefix("✳ Claude Code") == "Claude Code"

    def test_strips_spinner(self):
        assert strip_prefix("⠐  Refactor parser") == "Refactor parser"

    def test_no_prefix_unchanged(self):
        assert strip_prefix("  plain title ") == "  plain title "

    def test_empty(self):
        assert strip_prefix("") == ""

    def test_prefix_only(self):
        assert strip_prefix("✳") == ""

    @pytest.mark.parametrize("title", [
        "✳ Claude Code",
        "⠂ ✳ stacked",
        "✳ ✳",
        "plain",
        "",
        "✳   spaced  ",
    ])
    def test_idempotent(self, title):
        once = strip_prefix(title)
        assert strip_prefix(once) == once


class TestClassifyContent:
    """Test classify_content"""

    def test_confirmation_after_prompt_is_waiting(self):
        content = "❯ do the thing\nDo you want to proceed?\nEsc to cancel"
        assert classify_content(content) == ActivityState.WAITING

    def test_prompt_without_confirmation_is_idle(self):
        content = "output\n❯ do the thing\nDone."
        assert classify_content(content) == ActivityState.IDLE

    def test_no_prompt_is_idle(self):
        content = "Do you want to proceed?\nEsc to cancel"
        assert classify_content(content) == ActivityState.IDLE

    def test_prompt_on_last_line_is_idle(self):
        content = "Esc to cancel\n❯ "
        assert classify_content(content) == ActivityState.IDLE

    def test_confirmation_before_last_prompt_is_idle(self):
        """An old dialog earlier in scrollback must not count."""
        content = (
            "❯ first request\n"
            "Esc to cancel\n"
            "approved\n"
            "❯ second request\n"
            "all done\n"
        )
        assert classify_content(content) == ActivityState.IDLE

    def test_uses_last_of_several_prompts(self):
        content = "❯ one\nok\n❯ two\nEsc to cancel\n"
        assert classify_content(content) == ActivityState.WAITING

    def test_empty_content(self):
        assert classify_content("") == ActivityState.IDLE
