"""Domain-specific exceptions for cache items.

Every error carries a human-readable message, a machine-readable error code
and a details mapping, so callers can handle them programmatically.
"""

from typing import Any


class CacheItemError(Exception):
    """Base exception for all cache item errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code for programmatic handling
            details: Additional error context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class DomainError(CacheItemError):
    """Base class for domain-layer errors."""

    pass


class InvalidArgumentError(DomainError):
    """Raised when an operation receives an argument of an unsupported kind."""

    def __init__(self, message: str, argument: str, given: Any, **kwargs: Any) -> None:
        """
        Initialize invalid argument error.

        Args:
            message: Error message
            argument: Name of the rejected argument
            given: The rejected value; only its type name is recorded
            **kwargs: Additional error details
        """
        details = {
            "argument": argument,
            "given_type": type_name(given),
            **kwargs.pop("details", {}),
        }
        super().__init__(message, error_code="INVALID_ARGUMENT", details=details)


def type_name(value: Any) -> str:
    """Return the runtime type name of a value as shown in error messages."""
    if value is None:
        return "NoneType"
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
