"""Domain entities for cache items."""

from __future__ import annotations

from .cache_item import MISSING, CacheItem

__all__ = ["MISSING", "CacheItem"]
