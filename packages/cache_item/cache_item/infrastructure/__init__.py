"""Infrastructure for cache items: clocks, diagnostics and logging."""

from __future__ import annotations

from .clock import FrozenClock, SystemClock
from .diagnostics import (
    CacheItemWarning,
    LoggerSink,
    WarningSink,
    emit_diagnostic,
    interpolate,
    select_sink,
)

__all__ = [
    "CacheItemWarning",
    "FrozenClock",
    "LoggerSink",
    "SystemClock",
    "WarningSink",
    "emit_diagnostic",
    "interpolate",
    "select_sink",
]
