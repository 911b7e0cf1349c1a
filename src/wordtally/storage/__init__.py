"""Storage package — factory for settings store selection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wordtally.storage.base import OPTION_KEYS, SettingsStore

if TYPE_CHECKING:
    from wordtally.config.settings import Settings

logger = logging.getLogger(__name__)

__all__ = [
    "OPTION_KEYS",
    "SettingsStore",
    "create_settings_store",
]


def create_settings_store(settings: Settings) -> SettingsStore:
    """Create the appropriate settings store based on settings.

    Returns JsonBackend when STORAGE_BACKEND=json and the file's directory
    is usable, otherwise falls back to MemoryBackend.
    """
    if settings.storage_backend == "json":
        try:
            from wordtally.storage.json_backend import JsonBackend

            backend = JsonBackend(settings.settings_file_path)
            backend.path.parent.mkdir(parents=True, exist_ok=True)
            logger.info("Using JSON settings store (file: %s)", backend.path)
            return backend
        except OSError:
            logger.warning(
                "Failed to prepare JSON settings file, falling back to memory",
                exc_info=True,
            )

    from wordtally.storage.memory_backend import MemoryBackend

    logger.info("Using in-memory settings store")
    return MemoryBackend()
