"""Display text for the count label and the frequency detail view."""

from __future__ import annotations

from wordtally.config.defaults import (
    EMPTY_FREQUENCY_MESSAGE,
    FREQUENCY_TITLE,
    WORD_COUNT_LABEL,
)


def format_count_label(count: int) -> str:
    """Build the live label text, e.g. ``"42 words"``."""
    return WORD_COUNT_LABEL.format(count=count)


def build_frequency_table(rows: list[tuple[str, int]]) -> str:
    """Render ``(word, count)`` rows as a plain-text two-column table.

    Rows are rendered in the order given. An empty list renders the
    fallback message instead of a header with no body.
    """
    if not rows:
        return f"{FREQUENCY_TITLE}\n{'=' * 40}\n\n{EMPTY_FREQUENCY_MESSAGE}\n"

    width = max(len("Word"), *(len(word) for word, _ in rows))
    lines = [
        FREQUENCY_TITLE,
        "=" * 40,
        "",
        f"{'Word':<{width}}  Count",
        f"{'-' * width}  -----",
    ]
    lines.extend(f"{word:<{width}}  {count:>5}" for word, count in rows)
    return "\n".join(lines) + "\n"
