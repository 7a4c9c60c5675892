"""Configuration for the RAWG client."""

from rawgapi.config.settings import RawgSettings

__all__ = ["RawgSettings"]
