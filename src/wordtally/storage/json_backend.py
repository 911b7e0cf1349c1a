"""JSON file settings store — default backend for standalone hosts."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class JsonBackend:
    """Persist the options blob as a single JSON object on disk."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any] | None:
        """Read the blob; a missing file means nothing was saved yet.

        Raises ``ValueError`` when the file does not hold a JSON object.
        """
        if not self._path.exists():
            logger.debug("No settings file at %s", self._path)
            return None
        with self._path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {self._path}")
        return data

    def save(self, data: dict[str, Any]) -> None:
        """Write the blob, creating parent directories if needed."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
        logger.debug("Saved settings to %s", self._path)
