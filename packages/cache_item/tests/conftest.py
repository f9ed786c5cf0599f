"""Shared fixtures for cache item tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest
from cache_item.config import get_config
from cache_item.domain.entities import MISSING, CacheItem
from cache_item.infrastructure.clock import FrozenClock

NOW = 1_700_000_000


@pytest.fixture(autouse=True)
def fresh_config() -> Iterator[None]:
    """Drop the cached configuration around each test."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def clock() -> FrozenClock:
    """Clock frozen at a known Unix time."""
    return FrozenClock(NOW)


@pytest.fixture
def make_item(clock: FrozenClock) -> Callable[..., CacheItem]:
    """Build items bound to the frozen clock."""

    def factory(key: str = "item-key", value: Any = MISSING, **kwargs: Any) -> CacheItem:
        kwargs.setdefault("default_lifetime", 30)
        return CacheItem(key, value, clock=clock, **kwargs)

    return factory


@pytest.fixture
def lifetime_of() -> Callable[[CacheItem], int | None]:
    """Read the lifetime an item exports to its pool."""

    def read(item: CacheItem) -> int | None:
        return item._cast()[CacheItem.CAST_PREFIX + "lifetime"]

    return read
