"""Abstract interface for cache items.

This module defines the contract shared by every cache item handed out by a
cache pool: key and value access, hit information and expiration control.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Any, Self


class CacheItemInterface(ABC):
    """Contract of a single cache item."""

    @abstractmethod
    def get_key(self) -> str:
        """Return the key of this item."""
        ...

    @abstractmethod
    def get(self) -> Any:
        """Return the value held by this item."""
        ...

    @abstractmethod
    def is_hit(self) -> bool:
        """Return whether the item results from a successful lookup."""
        ...

    @abstractmethod
    def set(self, value: Any) -> Self:
        """Set the value held by this item.

        Args:
            value: Any payload

        Returns:
            The item itself
        """
        ...

    @abstractmethod
    def expires_at(self, expiration: datetime | None) -> Self:
        """Set the instant after which the item is considered expired.

        Args:
            expiration: Absolute expiration instant, or None for the default

        Returns:
            The item itself

        Raises:
            InvalidArgumentError: If expiration is of an unsupported type
        """
        ...

    @abstractmethod
    def expires_after(self, time: timedelta | int | None) -> Self:
        """Set the period of time after which the item is considered expired.

        Args:
            time: Duration, number of seconds, or None for the default

        Returns:
            The item itself

        Raises:
            InvalidArgumentError: If time is of an unsupported type
        """
        ...
