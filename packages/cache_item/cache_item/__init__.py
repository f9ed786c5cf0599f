"""Cache item value objects with lifetime normalization and diagnostics."""

from __future__ import annotations

from .application.services import CacheItemFactory
from .domain.entities import MISSING, CacheItem
from .domain.enums import LifetimeState
from .domain.exceptions import CacheItemError, DomainError, InvalidArgumentError
from .infrastructure.diagnostics import CacheItemWarning, emit_diagnostic
from .version import __version__

__all__ = [
    "MISSING",
    "CacheItem",
    "CacheItemError",
    "CacheItemFactory",
    "CacheItemWarning",
    "DomainError",
    "InvalidArgumentError",
    "LifetimeState",
    "__version__",
    "emit_diagnostic",
]
