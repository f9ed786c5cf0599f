"""Abstract clock interface.

Cache items read the current time through this interface so that tests can
substitute a deterministic clock.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Clock(ABC):
    """Source of the current wall-clock time."""

    @abstractmethod
    def now(self) -> int:
        """Return the current Unix time in whole seconds."""
        ...
