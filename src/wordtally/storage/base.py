"""Settings store protocol — defines the contract all backends must implement."""

from __future__ import annotations

from typing import Any, Protocol

# Keys of the persisted options blob
OPTION_KEYS: tuple[str, ...] = (
    "countOnlyActualWords",
    "excludeFrontmatter",
)


class SettingsStore(Protocol):
    """Protocol for option persistence (JSON file, host-owned blob, etc.)."""

    def load(self) -> dict[str, Any] | None:
        """Return the stored blob, or None when nothing was saved yet."""
        ...

    def save(self, data: dict[str, Any]) -> None:
        """Replace the stored blob with *data*."""
        ...
