"""Default constants for wordtally.

The two counting toggles can be overridden through environment variables
(see ``Settings``) or by the user at runtime (see ``Preferences``). The
display strings below are what the host label and frequency surface show.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Counting toggles
# ---------------------------------------------------------------------------
DEFAULT_COUNT_ONLY_ACTUAL_WORDS: bool = True
DEFAULT_EXCLUDE_FRONTMATTER: bool = True

# Repeated-word threshold for the frequency view (count > 1).
DEFAULT_FREQUENCY_MIN_COUNT: int = 2

# ---------------------------------------------------------------------------
# "Actual word" letter class: unaccented Latin plus the Latin-1 accented
# range. Non-Latin scripts are intentionally not matched.
# ---------------------------------------------------------------------------
LETTER_CLASS: str = "[a-zA-ZÀ-ÿ]"

# ---------------------------------------------------------------------------
# Display strings
# ---------------------------------------------------------------------------
INITIAL_LABEL: str = "Words: 0"
NO_DOCUMENT_LABEL: str = "No editor"
WORD_COUNT_LABEL: str = "{count} words"
FREQUENCY_TITLE: str = "Word Frequency"
EMPTY_FREQUENCY_MESSAGE: str = "No repeated words found."

# ---------------------------------------------------------------------------
# Settings tab metadata: (option key, display name, description)
# ---------------------------------------------------------------------------
TOGGLES: tuple[tuple[str, str, str], ...] = (
    (
        "count_only_actual_words",
        "Count only actual words",
        "Only count strings containing at least one letter "
        "(a-z, A-Z, accented characters, etc.)",
    ),
    (
        "exclude_frontmatter",
        "Exclude frontmatter",
        "Do not count words in YAML frontmatter",
    ),
)
