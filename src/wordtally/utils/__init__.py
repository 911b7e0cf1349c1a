"""Utility functions for text processing and logging setup."""

from wordtally.utils.log_utils import setup_logging
from wordtally.utils.text_utils import (
    count_words,
    has_letter,
    remove_front_matter,
    repeated_words,
    tokenize,
    word_frequency,
)

__all__ = [
    "count_words",
    "has_letter",
    "remove_front_matter",
    "repeated_words",
    "setup_logging",
    "tokenize",
    "word_frequency",
]
