"""Application services for cache items."""

from __future__ import annotations

from .item_factory import CacheItemFactory

__all__ = ["CacheItemFactory"]
