"""Clock implementations."""

from __future__ import annotations

import math
import time
from datetime import UTC, datetime, timedelta

from cache_item.domain.interfaces import Clock

_ONE_SECOND = timedelta(seconds=1)


class SystemClock(Clock):
    """Clock reading the system wall-clock time."""

    def now(self) -> int:
        """Return the current Unix time in whole seconds."""
        return int(time.time())


class FrozenClock(Clock):
    """Clock standing still at a given instant until moved explicitly.

    Useful for pools and tests that need deterministic expirations.
    """

    def __init__(self, now: int | datetime | None = None) -> None:
        """Initialize frozen clock.

        Args:
            now: Initial Unix time or datetime, naive ones taken as UTC; the
                system time if omitted
        """
        if now is None:
            now = int(time.time())
        elif isinstance(now, datetime):
            if now.tzinfo is None:
                now = now.replace(tzinfo=UTC)
            now = math.floor(now.timestamp())
        self._now = now

    def now(self) -> int:
        """Return the frozen Unix time."""
        return self._now

    def advance(self, delta: timedelta | int) -> None:
        """Move the clock forward (or backward for negative values).

        Args:
            delta: Duration or number of seconds
        """
        if isinstance(delta, timedelta):
            delta = delta // _ONE_SECOND
        self._now += delta
