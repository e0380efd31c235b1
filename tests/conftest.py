"""Shared test fixtures for the lineedit test suite."""

from unittest.mock import MagicMock

import pytest

from lineedit.config import EditorConfig
from lineedit.editor import Editor
from lineedit.engine import Engine
from lineedit.history import HistoryStore


@pytest.fixture
def history():
    """Create an empty HistoryStore with the default capacity."""
    return HistoryStore()


@pytest.fixture
def config():
    """Create a fresh EditorConfig."""
    return EditorConfig()


@pytest.fixture
def engine():
    """Create a mock engine that returns "line" from read_line."""
    mock = MagicMock(spec=Engine)
    mock.read_line.return_value = "line"
    return mock


@pytest.fixture
def editor(config, history, engine):
    """Create an Editor wired to the mock engine."""
    return Editor(config=config, history=history, engine=engine)


@pytest.fixture(autouse=True)
def _utf8_locale(monkeypatch):
    """Validate text as UTF-8 regardless of the machine's locale."""
    monkeypatch.setattr("lineedit.text.locale_encoding", lambda: "utf-8")
    monkeypatch.setattr("lineedit.history.locale_encoding", lambda: "utf-8")
