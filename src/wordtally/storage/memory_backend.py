"""In-memory settings store for hosts that own persistence themselves."""

from __future__ import annotations

from typing import Any


class MemoryBackend:
    """Keep the options blob in process; the host may read ``data`` back."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self.data: dict[str, Any] | None = None
        if initial is not None:
            self.data = dict(initial)

    def load(self) -> dict[str, Any] | None:
        return dict(self.data) if self.data is not None else None

    def save(self, data: dict[str, Any]) -> None:
        self.data = dict(data)
