"""Cache item entity.

This module defines the CacheItem value object handed out by cache pools and
the MISSING sentinel marking an item that holds no value. Expirations given as
absolute instants, durations or plain seconds are all normalized into a single
signed lifetime in seconds.
"""

from __future__ import annotations

import math
import time
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, Self

from cache_item.domain.enums import LifetimeState
from cache_item.domain.exceptions import InvalidArgumentError, type_name
from cache_item.domain.interfaces import CacheItemInterface

if TYPE_CHECKING:
    from cache_item.domain.interfaces import Clock


class _Missing(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing.MISSING

_ONE_SECOND = timedelta(seconds=1)


class CacheItem(CacheItemInterface):
    """A single (key, value, hit, lifetime) tuple of a cache pool.

    Items are built by the pool that owns them, either as a miss (no value,
    ``is_hit`` false) or as a hit carrying the stored value. Callers mutate
    them through ``set``, ``expires_at`` and ``expires_after`` and hand them
    back to the pool for saving.

    The lifetime is encoded as:
        - None: unset, the pool applies its default at save time
        - positive int: seconds to live
        - negative int: already expired; a computed zero is stored as -1

    Items are not thread-safe and must not be shared between concurrent
    callers without external locking.
    """

    # Prefix of the field names exported to trusted pool code by _cast()
    CAST_PREFIX: Final = "\0cache_item.CacheItem\0"

    def __init__(
        self,
        key: str,
        value: Any = MISSING,
        *,
        is_hit: bool = False,
        default_lifetime: int = 0,
        clock: Clock | None = None,
    ) -> None:
        """Initialize cache item.

        Args:
            key: Cache key, validated by the caller
            value: Initial value, MISSING when the item holds none
            is_hit: Whether the value comes from a successful lookup
            default_lifetime: Lifetime applied when expiration is reset
            clock: Time source; the system clock when omitted
        """
        self._key = key
        self._value = value
        self._is_hit = bool(is_hit)
        self._default_lifetime = default_lifetime
        self._lifetime: int | None = None
        self._lifetime_state = LifetimeState.UNSET
        self._clock = clock

    def get_key(self) -> str:
        """Return the key of this item."""
        return self._key

    def get(self) -> Any:
        """Return the held value, or MISSING if none was ever set."""
        return self._value

    def is_hit(self) -> bool:
        """Return whether the item results from a successful lookup."""
        return self._is_hit

    def set(self, value: Any) -> Self:
        """Replace the held value."""
        self._value = value
        return self

    def expires_at(self, expiration: datetime | None) -> Self:
        """Set the absolute instant after which the item expires.

        Naive datetimes are taken as UTC. An instant equal to the current
        second yields a lifetime of -1; instants in the past keep their
        negative delta.

        Args:
            expiration: Expiration instant, or None to restore the default

        Returns:
            The item itself

        Raises:
            InvalidArgumentError: If expiration is neither a datetime nor None
        """
        if expiration is None:
            self._reset()
        elif isinstance(expiration, datetime):
            if expiration.tzinfo is None:
                expiration = expiration.replace(tzinfo=UTC)
            expires = math.floor(expiration.timestamp())
            self._store(expires - self._now())
        else:
            raise InvalidArgumentError(
                f'Expiration date must be a datetime or None, "{type_name(expiration)}" given',
                argument="expiration",
                given=expiration,
            )

        return self

    def expires_after(self, time: timedelta | int | None) -> Self:
        """Set the period of time after which the item expires.

        A zero duration or zero seconds yields a lifetime of -1.

        Args:
            time: Duration, number of seconds, or None to restore the default

        Returns:
            The item itself

        Raises:
            InvalidArgumentError: If time is not a timedelta, an int or None
        """
        if time is None:
            self._reset()
        elif isinstance(time, timedelta):
            # Whole seconds, rounded down like the expiry instant now + time
            self._store(time // _ONE_SECOND)
        elif isinstance(time, int) and not isinstance(time, bool):
            self._store(time)
        else:
            raise InvalidArgumentError(
                "Expiration time must be an int, a timedelta or None, "
                f'"{type_name(time)}" given',
                argument="time",
                given=time,
            )

        return self

    @property
    def lifetime_state(self) -> LifetimeState:
        """State reached by the last expiration call."""
        return self._lifetime_state

    def _reset(self) -> None:
        self._lifetime = self._default_lifetime
        self._lifetime_state = LifetimeState.DEFAULT

    def _store(self, lifetime: int) -> None:
        if lifetime == 0:
            lifetime = -1
        self._lifetime = lifetime
        self._lifetime_state = LifetimeState.FINITE if lifetime > 0 else LifetimeState.IMMEDIATE

    def _now(self) -> int:
        if self._clock is not None:
            return self._clock.now()
        return int(time.time())

    def _cast(self) -> dict[str, Any]:
        """Export the item fields for the pool that persists it.

        Keys are field names prefixed with CAST_PREFIX. This mapping is the
        stable contract pool code reads after a save-triggering call.
        """
        prefix = self.CAST_PREFIX
        return {
            f"{prefix}key": self._key,
            f"{prefix}value": self._value,
            f"{prefix}is_hit": self._is_hit,
            f"{prefix}lifetime": self._lifetime,
            f"{prefix}default_lifetime": self._default_lifetime,
        }

    def __repr__(self) -> str:
        return (
            f"CacheItem(key={self._key!r}, is_hit={self._is_hit}, "
            f"lifetime={self._lifetime!r})"
        )
