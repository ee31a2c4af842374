from __future__ import annotations

import io

import pytest

from apptools.config import CONFIG_ENV_VAR, reset_config
from apptools.terminal import TerminalOutput


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Fresh config and terminal singletons for every test."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_config()
    TerminalOutput.reset_instance()
    yield
    reset_config()
    TerminalOutput.reset_instance()


@pytest.fixture
def terminal():
    """A TerminalOutput writing to in-memory streams instead of the real terminal."""
    return TerminalOutput(stream=io.StringIO(), err_stream=io.StringIO())
