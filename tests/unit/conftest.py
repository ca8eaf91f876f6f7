"""
Unit test configuration for csm.
"""

import pytest

from tests.fixtures import FakeTmux


@pytest.fixture
def fake_tmux():
    """An empty FakeTmux; tests fill in panes and contents."""
    return FakeTmux()


@pytest.fixture(autouse=True)
def no_tmux_socket(monkeypatch):
    """Keep tests away from any real tmux socket override."""
    monkeypatch.delenv("CSM_TMUX_SOCKET", raising=False)
