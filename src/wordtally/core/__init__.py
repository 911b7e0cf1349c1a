"""Core modules: preferences, the reactive tracker and display text."""

from wordtally.core.preferences import Preferences, SettingsPersistenceError
from wordtally.core.report import build_frequency_table, format_count_label
from wordtally.core.tracker import TrackerState, WordCountTracker

__all__ = [
    "Preferences",
    "SettingsPersistenceError",
    "TrackerState",
    "WordCountTracker",
    "build_frequency_table",
    "format_count_label",
]
