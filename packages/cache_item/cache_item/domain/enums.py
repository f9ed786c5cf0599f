"""Domain enums for cache items."""

from __future__ import annotations

from enum import Enum


class LifetimeState(Enum):
    """Lifetime state of a cache item."""

    UNSET = "UNSET"  # No expiration call yet, collaborator default applies
    DEFAULT = "DEFAULT"  # Explicitly reset to the default lifetime
    FINITE = "FINITE"  # Positive number of seconds to live
    IMMEDIATE = "IMMEDIATE"  # Already expired, negative lifetime
