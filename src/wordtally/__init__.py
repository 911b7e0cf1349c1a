"""wordtally — live word count and word frequency for editor documents."""

from wordtally.plugin import WordCountPlugin

__all__ = ["WordCountPlugin"]
