"""Host collaborator protocols: what the editor must provide to the core."""

from __future__ import annotations

from typing import Protocol


class DocumentView(Protocol):
    """The focused, editable document."""

    def get_full_text(self) -> str:
        """Return the whole document text."""
        ...

    def get_selection(self) -> str:
        """Return the selected text, or an empty string."""
        ...


class StatusLabel(Protocol):
    """A single text label, e.g. a status bar item."""

    def set_text(self, text: str) -> None: ...


class FrequencySurface(Protocol):
    """A modal or table surface for the frequency detail view."""

    def show_rows(self, title: str, rows: list[tuple[str, int]]) -> None:
        """Display ``(word, count)`` rows, already sorted."""
        ...

    def show_message(self, title: str, message: str) -> None:
        """Display a plain message instead of a table."""
        ...
