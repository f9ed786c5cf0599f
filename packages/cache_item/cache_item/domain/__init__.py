"""Domain layer for cache items."""
