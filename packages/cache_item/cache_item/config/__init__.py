"""Configuration package for cache items."""

from .config import CacheItemConfig, get_config, reload_config

__all__ = ["CacheItemConfig", "get_config", "reload_config"]
