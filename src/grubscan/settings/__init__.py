"""Search path configuration."""

from grubscan.settings.loader import SearchPathLoader, SearchPaths

__all__ = ["SearchPathLoader", "SearchPaths"]
