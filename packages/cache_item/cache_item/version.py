"""Version information for cache-item."""

__version__ = "0.1.0"
