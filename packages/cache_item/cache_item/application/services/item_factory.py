"""Factory building cache items for cache pools.

Pools never construct items from arbitrary keys: they go through this
factory, which validates the key and injects the default lifetime, the clock
and the diagnostic sink shared by every item of the pool.
"""

from __future__ import annotations

import logging
from typing import Any

from cache_item.config import get_config
from cache_item.domain.entities import MISSING, CacheItem
from cache_item.domain.exceptions import InvalidArgumentError, type_name
from cache_item.domain.interfaces import Clock, DiagnosticSink
from cache_item.infrastructure.clock import SystemClock
from cache_item.infrastructure.diagnostics import emit_diagnostic, select_sink
from cache_item.infrastructure.logging import get_logger

logger = get_logger(__name__)


class CacheItemFactory:
    """Builds hit and miss items sharing one pool configuration."""

    def __init__(
        self,
        default_lifetime: int | None = None,
        clock: Clock | None = None,
        diagnostics: logging.Logger | DiagnosticSink | Any | None = None,
        reserved_characters: str | None = None,
    ) -> None:
        """Initialize the item factory.

        Args:
            default_lifetime: Lifetime applied on expiration reset (defaults to config value)
            clock: Time source for items (defaults to the system clock)
            diagnostics: Logger or sink for reported anomalies; warnings without one
            reserved_characters: Characters forbidden in keys (defaults to config value)
        """
        config = get_config()

        self._default_lifetime = (
            default_lifetime if default_lifetime is not None else config.item.default_lifetime
        )
        self._reserved_characters = (
            reserved_characters
            if reserved_characters is not None
            else config.item.reserved_characters
        )
        self._clock = clock if clock is not None else SystemClock()
        # report() adds one frame between the pool code and emit_diagnostic()
        self._sink = select_sink(diagnostics, stacklevel=4)

    @property
    def default_lifetime(self) -> int:
        return self._default_lifetime

    @property
    def clock(self) -> Clock:
        return self._clock

    def validate_key(self, key: Any) -> str:
        """Validate a cache key.

        Args:
            key: Candidate key

        Returns:
            The key, unchanged

        Raises:
            InvalidArgumentError: If the key is not a non-empty string free of
                reserved characters
        """
        if not isinstance(key, str):
            raise InvalidArgumentError(
                f'Cache key must be string, "{type_name(key)}" given',
                argument="key",
                given=key,
            )
        if not key:
            raise InvalidArgumentError(
                "Cache key length must be greater than zero", argument="key", given=key
            )
        reserved = [char for char in self._reserved_characters if char in key]
        if reserved:
            raise InvalidArgumentError(
                f'Cache key "{key}" contains reserved characters "{self._reserved_characters}"',
                argument="key",
                given=key,
                details={"key": key, "reserved": "".join(reserved)},
            )
        return key

    def create(self, key: str, value: Any = MISSING, is_hit: bool = False) -> CacheItem:
        """Create an item for a validated key.

        Args:
            key: Cache key
            value: Initial value; MISSING for none
            is_hit: Whether the value comes from a successful lookup

        Returns:
            The new cache item

        Raises:
            InvalidArgumentError: If the key is invalid
        """
        item = CacheItem(
            self.validate_key(key),
            value,
            is_hit=is_hit,
            default_lifetime=self._default_lifetime,
            clock=self._clock,
        )
        logger.debug("Created cache item", extra={"key": key, "is_hit": is_hit})
        return item

    def miss(self, key: str) -> CacheItem:
        """Create an item for a key the pool did not find."""
        return self.create(key)

    def hit(self, key: str, value: Any) -> CacheItem:
        """Create an item carrying a value the pool found."""
        return self.create(key, value, is_hit=True)

    def report(self, message: str, **context: Any) -> None:
        """Report a recoverable anomaly through the factory's diagnostic sink.

        Args:
            message: Message template with ``{name}`` placeholders
            **context: Placeholder values and extra data
        """
        emit_diagnostic(self._sink, message, context)
