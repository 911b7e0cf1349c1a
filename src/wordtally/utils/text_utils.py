"""Pure text utilities: tokenizing, word counting, frontmatter and frequency.

Every function here is total over arbitrary strings. No external
dependencies, stdlib only.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Mapping

from wordtally.config.defaults import DEFAULT_FREQUENCY_MIN_COUNT, LETTER_CLASS

# Pre-compiled patterns
_HAS_LETTER = re.compile(LETTER_CLASS)
# ECMAScript whitespace: includes U+FEFF, excludes the \x1c-\x1f separators
_WHITESPACE = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)
_FRONT_MATTER = re.compile(
    r"\A---[^\S\r\n]*\r?\n"  # opening delimiter
    r"(?:.*\r?\n)*?"  # block body, shortest match
    r"---[^\S\r\n]*(?:\r?\n|\Z)"  # first closing delimiter
)


def has_letter(token: str) -> bool:
    """Return True if *token* is an "actual word" (contains a Latin letter)."""
    return _HAS_LETTER.search(token) is not None


def tokenize(text: str, only_actual_words: bool = True) -> list[str]:
    """Split *text* on runs of whitespace, dropping empty tokens.

    With *only_actual_words* the tokens without any letter (numbers,
    punctuation, symbols, non-Latin scripts) are dropped as well.
    """
    if not text or not isinstance(text, str):
        return []

    tokens = [token for token in _WHITESPACE.split(text) if token]
    if only_actual_words:
        return [token for token in tokens if has_letter(token)]
    return tokens


def count_words(text: str, only_actual_words: bool = True) -> int:
    """Count whitespace-delimited words in *text*."""
    return len(tokenize(text, only_actual_words))


def remove_front_matter(text: str) -> str:
    """Strip a leading ``---`` delimited block from *text*.

    The block runs from an opening ``---`` line at the very start of the
    text to the first closing ``---`` line. Text without a leading block
    is returned unchanged. The block contents are not parsed.
    """
    if not isinstance(text, str):
        return ""

    # Repeat so the result never starts with another delimited block.
    match = _FRONT_MATTER.match(text)
    while match is not None:
        text = text[match.end():]
        match = _FRONT_MATTER.match(text)
    return text


def word_frequency(text: str, only_actual_words: bool = True) -> Counter[str]:
    """Count case-insensitive occurrences of each token in *text*.

    Keys are lowercased and keep first-seen order.
    """
    return Counter(token.lower() for token in tokenize(text, only_actual_words))


def repeated_words(
    frequency: Mapping[str, int],
    min_count: int = DEFAULT_FREQUENCY_MIN_COUNT,
) -> list[tuple[str, int]]:
    """Return ``(word, count)`` pairs seen at least *min_count* times.

    Sorted by descending count; ties keep the mapping's order.
    """
    rows = [(word, count) for word, count in frequency.items() if count >= min_count]
    return sorted(rows, key=lambda row: row[1], reverse=True)
