"""Plugin entry point — wires settings, store, preferences and tracker."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wordtally.config import Settings, get_settings
from wordtally.core.preferences import Preferences
from wordtally.core.tracker import WordCountTracker
from wordtally.storage import create_settings_store
from wordtally.utils.log_utils import setup_logging

if TYPE_CHECKING:
    from wordtally.config.settings import CountOptions
    from wordtally.core.host import FrequencySurface, StatusLabel
    from wordtally.storage.base import SettingsStore

logger = logging.getLogger(__name__)


class WordCountPlugin:
    """Lifecycle owner the host instantiates once per session.

    The host adapter calls ``load()`` on startup, forwards editor events to
    ``plugin.tracker`` and calls ``unload()`` on shutdown.
    """

    def __init__(
        self,
        label: StatusLabel,
        surface: FrequencySurface | None = None,
        *,
        settings: Settings | None = None,
        store: SettingsStore | None = None,
    ) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.store: SettingsStore = (
            store if store is not None else create_settings_store(self.settings)
        )
        self.preferences = Preferences(self.store, self.settings.default_options())
        self.tracker = WordCountTracker(
            self.preferences,
            label,
            surface,
            frequency_min_count=self.settings.frequency_min_count,
        )
        self._loaded = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Read preferences, start listening and show the first count."""
        setup_logging(self.settings.log_level)
        logger.info("Loading word count plugin")

        self.preferences.load()
        self.preferences.subscribe(self.tracker.on_options_changed)
        self._loaded = True
        self.tracker.refresh()

    def unload(self) -> None:
        if not self._loaded:
            return
        self.preferences.unsubscribe(self.tracker.on_options_changed)
        self._loaded = False
        logger.info("Unloading word count plugin")

    def toggle(self, name: str, value: bool) -> CountOptions:
        """Settings-tab action: change one option, save and recount."""
        return self.preferences.set_option(name, value)

    @property
    def loaded(self) -> bool:
        return self._loaded
