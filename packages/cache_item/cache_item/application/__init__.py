"""Application layer for cache items."""
