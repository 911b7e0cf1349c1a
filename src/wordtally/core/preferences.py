"""User preferences: load/save the counting toggles and notify listeners."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from wordtally.config.settings import CountOptions
from wordtally.storage.base import OPTION_KEYS

if TYPE_CHECKING:
    from wordtally.storage.base import SettingsStore

logger = logging.getLogger(__name__)

OptionsListener = Callable[[CountOptions], None]

__all__ = [
    "OptionsListener",
    "Preferences",
    "SettingsPersistenceError",
]


class SettingsPersistenceError(RuntimeError):
    """Raised when the options blob cannot be written to the store."""


class Preferences:
    """Own the current ``CountOptions`` and keep the store in sync."""

    def __init__(
        self,
        store: SettingsStore,
        defaults: CountOptions | None = None,
    ) -> None:
        self._store = store
        self._defaults = defaults if defaults is not None else CountOptions()
        self._options = self._defaults.model_copy()
        self._listeners: list[OptionsListener] = []

    @property
    def options(self) -> CountOptions:
        return self._options

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> CountOptions:
        """Load stored options over the defaults.

        Never raises: an unreadable store leaves the defaults in place, and
        an invalid stored value only resets that one option. Both are logged.
        """
        try:
            blob = self._store.load()
        except Exception:
            logger.warning("Failed to load settings, using defaults", exc_info=True)
            blob = None

        if blob is None:
            self._options = self._defaults.model_copy()
            return self._options

        known = set(OPTION_KEYS) | set(CountOptions.model_fields)
        ignored = sorted(set(blob) - known)
        if ignored:
            logger.debug("Ignoring unknown stored keys: %s", ", ".join(ignored))

        # Each stored key is validated on its own; bad values keep the default
        overrides: dict[str, bool] = {}
        for name, field in CountOptions.model_fields.items():
            alias = field.alias or to_camel(name)
            key = alias if alias in blob else name
            if key not in blob:
                continue
            try:
                parsed = CountOptions.model_validate({key: blob[key]})
            except ValidationError as exc:
                logger.warning(
                    "Invalid stored value for %s, using default: %s", key, exc
                )
                continue
            overrides[name] = getattr(parsed, name)

        self._options = self._defaults.model_copy(update=overrides)
        logger.debug("Loaded settings: %s", self._options.to_blob())
        return self._options

    def save(self) -> None:
        """Persist the current options."""
        try:
            self._store.save(self._options.to_blob())
        except Exception as exc:
            logger.exception("Failed to save settings")
            raise SettingsPersistenceError(str(exc)) from exc

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_option(self, name: str, value: bool) -> CountOptions:
        """Change one toggle, notify listeners, then persist.

        Raises ``KeyError`` for an unknown option name.
        """
        if name not in CountOptions.model_fields:
            raise KeyError(f"Unknown option: {name}")

        self._options = self._options.model_copy(update={name: bool(value)})
        logger.info("Option %s set to %s", name, bool(value))
        self._notify()
        self.save()
        return self._options

    def subscribe(self, listener: OptionsListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: OptionsListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._options)
