"""Shared pytest fixtures for wordtally tests."""

from __future__ import annotations

from typing import Generator
from unittest.mock import MagicMock

import pytest

from wordtally.config.settings import CountOptions, Settings, get_settings
from wordtally.core.preferences import Preferences
from wordtally.storage.memory_backend import MemoryBackend


@pytest.fixture()
def env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set the WORDTALLY_* env vars tests rely on and return them.

    Every test that needs a ``Settings`` instance should use this fixture
    (or ``settings``) to avoid leaking a real ``.env`` into tests.
    """
    values: dict[str, str] = {
        "WORDTALLY_STORAGE_BACKEND": "memory",
        "WORDTALLY_SETTINGS_FILE_PATH": "test_wordtally.json",
        "WORDTALLY_LOG_LEVEL": "debug",
        "WORDTALLY_FREQUENCY_MIN_COUNT": "2",
    }
    for key, val in values.items():
        monkeypatch.setenv(key, val)
    return values


@pytest.fixture()
def settings(env_vars: dict[str, str]) -> Generator[Settings, None, None]:
    """Return a fresh ``Settings`` loaded from mocked env vars.

    Clears the ``get_settings`` LRU cache before and after the test so
    singleton state never leaks between tests.
    """
    get_settings.cache_clear()
    yield Settings(_env_file=None)
    get_settings.cache_clear()


@pytest.fixture()
def store() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture()
def preferences(store: MemoryBackend) -> Preferences:
    return Preferences(store, CountOptions())


class FakeDocument:
    """Minimal in-memory ``DocumentView`` for driving the tracker."""

    def __init__(self, text: str = "", selection: str = "") -> None:
        self.text = text
        self.selection = selection

    def get_full_text(self) -> str:
        return self.text

    def get_selection(self) -> str:
        return self.selection


@pytest.fixture()
def document() -> FakeDocument:
    return FakeDocument("---\ntitle: Draft\n---\nThe quick brown fox")


@pytest.fixture()
def label() -> MagicMock:
    return MagicMock(name="label")


@pytest.fixture()
def surface() -> MagicMock:
    return MagicMock(name="surface")


@pytest.fixture()
def make_document() -> type[FakeDocument]:
    """Factory for documents with custom text and selection."""
    return FakeDocument
