"""Domain interfaces for cache items.

This module contains abstract interfaces that define contracts
for cache items and the collaborators they rely on.
"""

from __future__ import annotations

from .cache_item import CacheItemInterface
from .clock import Clock
from .diagnostic_sink import DiagnosticSink

__all__ = ["CacheItemInterface", "Clock", "DiagnosticSink"]
