"""Pydantic-based settings and the persisted counting options.

``Settings`` is read from ``.env`` (or real env vars) with the
``WORDTALLY_`` prefix. ``CountOptions`` is the small key-value blob the
host persists between sessions; its JSON keys are camelCase.

Usage::

    from wordtally.config import get_settings
    settings = get_settings()
    options = settings.default_options()
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from wordtally.config.defaults import (
    DEFAULT_COUNT_ONLY_ACTUAL_WORDS,
    DEFAULT_EXCLUDE_FRONTMATTER,
    DEFAULT_FREQUENCY_MIN_COUNT,
)


class CountOptions(BaseModel):
    """User-facing toggles, persisted as ``{"countOnlyActualWords": ..., ...}``."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    count_only_actual_words: bool = DEFAULT_COUNT_ONLY_ACTUAL_WORDS
    exclude_frontmatter: bool = DEFAULT_EXCLUDE_FRONTMATTER

    def to_blob(self) -> dict[str, bool]:
        """Serialize with the camelCase keys used on disk."""
        return self.model_dump(by_alias=True)


class Settings(BaseSettings):
    """Central configuration — every field maps to a WORDTALLY_* env var."""

    model_config = SettingsConfigDict(
        env_prefix="WORDTALLY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    # -- Storage ------------------------------------------------------------
    storage_backend: Literal["json", "memory"] = "json"
    settings_file_path: str = "wordtally.json"

    # -- Counting defaults (used when nothing is persisted) -----------------
    count_only_actual_words: bool = DEFAULT_COUNT_ONLY_ACTUAL_WORDS
    exclude_frontmatter: bool = DEFAULT_EXCLUDE_FRONTMATTER

    # -- Frequency view -----------------------------------------------------
    frequency_min_count: int = Field(default=DEFAULT_FREQUENCY_MIN_COUNT, ge=1)

    # -- General ------------------------------------------------------------
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> str:
        """Accept any casing for the level name."""
        if isinstance(value, str):
            return value.strip().upper() or "INFO"
        return "INFO"

    def default_options(self) -> CountOptions:
        """Counting options to fall back on when the store has none."""
        return CountOptions(
            count_only_actual_words=self.count_only_actual_words,
            exclude_frontmatter=self.exclude_frontmatter,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return Settings()
