"""Configuration module — ENV-driven settings and persisted counting options."""

from wordtally.config.settings import CountOptions, Settings, get_settings

__all__ = ["CountOptions", "Settings", "get_settings"]
