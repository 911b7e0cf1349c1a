"""Reactive word-count dispatcher driven by host editor events.

The host adapter forwards focus, content and selection notifications to a
``WordCountTracker``; every notification re-runs the count pipeline
synchronously and updates the label::

    focus/content/selection event
        -> selection (as-is) or full text (frontmatter stripped if enabled)
        -> count_words
        -> "<count> words"
"""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

from wordtally.config.defaults import (
    DEFAULT_FREQUENCY_MIN_COUNT,
    EMPTY_FREQUENCY_MESSAGE,
    FREQUENCY_TITLE,
    INITIAL_LABEL,
    NO_DOCUMENT_LABEL,
)
from wordtally.core.report import build_frequency_table, format_count_label
from wordtally.utils.text_utils import (
    count_words,
    remove_front_matter,
    repeated_words,
    word_frequency,
)

if TYPE_CHECKING:
    from wordtally.config.settings import CountOptions
    from wordtally.core.host import DocumentView, FrequencySurface, StatusLabel
    from wordtally.core.preferences import Preferences

logger = logging.getLogger(__name__)


class TrackerState(enum.Enum):
    NO_ACTIVE_DOCUMENT = "no-active-document"
    HAS_ACTIVE_DOCUMENT = "has-active-document"


class WordCountTracker:
    """Recompute and display the word count whenever the editor changes."""

    def __init__(
        self,
        preferences: Preferences,
        label: StatusLabel,
        surface: FrequencySurface | None = None,
        *,
        frequency_min_count: int = DEFAULT_FREQUENCY_MIN_COUNT,
    ) -> None:
        self._preferences = preferences
        self._label = label
        self._surface = surface
        self._min_count = frequency_min_count
        self._document: DocumentView | None = None
        self._count: int | None = None
        self._label.set_text(INITIAL_LABEL)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> TrackerState:
        if self._document is None:
            return TrackerState.NO_ACTIVE_DOCUMENT
        return TrackerState.HAS_ACTIVE_DOCUMENT

    @property
    def document(self) -> DocumentView | None:
        return self._document

    def current_count(self) -> int | None:
        """Last computed count, or None while no document is active."""
        return self._count

    # ------------------------------------------------------------------
    # Host event listeners
    # ------------------------------------------------------------------

    def on_active_document_changed(self, document: DocumentView | None) -> str:
        """Focus moved to *document*, or to nothing editable (None)."""
        previous = self.state
        self._document = document
        if self.state is not previous:
            logger.debug("Tracker state: %s -> %s", previous.value, self.state.value)
        return self.refresh()

    def on_content_changed(self) -> str:
        return self.refresh()

    def on_selection_changed(self) -> str:
        return self.refresh()

    def on_options_changed(self, options: CountOptions) -> None:
        logger.debug("Options changed, recounting: %s", options.to_blob())
        self.refresh()

    # ------------------------------------------------------------------
    # Pipelines
    # ------------------------------------------------------------------

    def refresh(self) -> str:
        """Recount the selection or document and update the label.

        Returns the text written to the label.
        """
        if self._document is None:
            self._count = None
            self._label.set_text(NO_DOCUMENT_LABEL)
            return NO_DOCUMENT_LABEL

        options = self._preferences.options
        selection = self._document.get_selection() or ""

        # Frontmatter rules only apply to whole-document counts
        if selection.strip():
            text = selection
        else:
            text = self._document_text(options)

        self._count = count_words(text, options.count_only_actual_words)
        label = format_count_label(self._count)
        self._label.set_text(label)
        return label

    def frequency_rows(self) -> list[tuple[str, int]]:
        """Repeated words of the whole document, most frequent first.

        Any selection is ignored.
        """
        if self._document is None:
            return []

        options = self._preferences.options
        frequency = word_frequency(
            self._document_text(options), options.count_only_actual_words
        )
        rows = repeated_words(frequency, self._min_count)
        logger.debug(
            "Frequency view: %d distinct words, %d repeated",
            len(frequency),
            len(rows),
        )
        return rows

    def frequency_report(self) -> str:
        """Plain-text frequency table for hosts without a table surface."""
        return build_frequency_table(self.frequency_rows())

    def show_frequency(self) -> list[tuple[str, int]]:
        """Push the frequency rows (or the fallback message) to the surface.

        Returns the rows shown (empty when the fallback message was shown).
        """
        rows = self.frequency_rows()

        if self._surface is None:
            logger.warning("No frequency surface attached, nothing to show")
            return rows

        if rows:
            self._surface.show_rows(FREQUENCY_TITLE, rows)
        else:
            self._surface.show_message(FREQUENCY_TITLE, EMPTY_FREQUENCY_MESSAGE)
        return rows

    def _document_text(self, options: CountOptions) -> str:
        if self._document is None:
            return ""
        text = self._document.get_full_text() or ""
        if options.exclude_frontmatter:
            text = remove_front_matter(text)
        return text
