"""Diagnostic delivery for recoverable cache anomalies.

Pools report anomalies such as a stored value that failed to unserialize
without depending on a logging setup. ``LoggerSink`` forwards to a standard
library logger with the context kept structured, ``ContextSink`` hands the raw
template and context to any other object with a ``warning`` method, and
``WarningSink`` renders the message and raises a ``CacheItemWarning`` through
the ``warnings`` module. ``select_sink`` picks one once, at construction time
of the reporting component.
"""

from __future__ import annotations

import contextlib
import logging
import re
import warnings
from collections.abc import Mapping
from typing import Any

from cache_item.domain.interfaces import DiagnosticSink

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")
_SCALAR_TYPES = (str, int, float, bool)


class CacheItemWarning(UserWarning):
    """Warning category for diagnostics emitted without a logger."""


def interpolate(message: str, context: Mapping[str, Any]) -> str:
    """Replace ``{name}`` placeholders with scalar context values.

    Placeholders whose value is missing or not a scalar are left as-is.
    """

    def replace(match: re.Match[str]) -> str:
        value = context.get(match.group(1))
        if isinstance(value, _SCALAR_TYPES):
            return str(value)
        return match.group(0)

    return _PLACEHOLDER.sub(replace, message)


class LoggerSink(DiagnosticSink):
    """Sink forwarding diagnostics to a logger at WARNING level."""

    def __init__(self, logger: logging.Logger | logging.LoggerAdapter[Any]) -> None:
        self._logger = logger

    @property
    def logger(self) -> logging.Logger | logging.LoggerAdapter[Any]:
        return self._logger

    def warning(self, message: str, context: Mapping[str, Any]) -> None:
        """Log the rendered message with the raw template and context attached."""
        self._logger.warning(
            interpolate(message, context),
            extra={"template": message, "context": dict(context)},
        )


class ContextSink(DiagnosticSink):
    """Sink calling ``warning(message, context)`` on any object offering it."""

    def __init__(self, target: Any) -> None:
        self._target = target

    @property
    def target(self) -> Any:
        return self._target

    def warning(self, message: str, context: Mapping[str, Any]) -> None:
        """Forward the raw template and context unchanged."""
        self._target.warning(message, context)


class WarningSink(DiagnosticSink):
    """Sink emitting diagnostics as ``CacheItemWarning`` warnings.

    The default stacklevel attributes the warning to the caller of
    ``emit_diagnostic``; each extra wrapping frame needs one more level.
    """

    def __init__(self, stacklevel: int = 3) -> None:
        self._stacklevel = stacklevel

    def warning(self, message: str, context: Mapping[str, Any]) -> None:
        """Emit the interpolated message as a warning."""
        warnings.warn(interpolate(message, context), CacheItemWarning, stacklevel=self._stacklevel)


def select_sink(
    logger: logging.Logger | logging.LoggerAdapter[Any] | DiagnosticSink | Any | None,
    stacklevel: int = 3,
) -> DiagnosticSink:
    """Choose the diagnostic sink for an optional logger.

    Args:
        logger: A logger, a ready-made sink, any object with a
            ``warning(message, context)`` method, or None
        stacklevel: Stack level of the WarningSink used when logger is None

    Returns:
        The sink itself, a LoggerSink wrapping a standard library logger, a
        ContextSink wrapping another object, or a WarningSink

    Raises:
        TypeError: If logger has no ``warning`` method
    """
    if isinstance(logger, DiagnosticSink):
        return logger
    if logger is None:
        return WarningSink(stacklevel=stacklevel)
    if isinstance(logger, logging.Logger | logging.LoggerAdapter):
        return LoggerSink(logger)
    if callable(getattr(logger, "warning", None)):
        return ContextSink(logger)
    raise TypeError(f'Diagnostic sink must provide warning(), "{type(logger).__name__}" given')


def emit_diagnostic(
    logger: logging.Logger | logging.LoggerAdapter[Any] | DiagnosticSink | Any | None,
    message: str,
    context: Mapping[str, Any] | None = None,
) -> None:
    """Report a recoverable anomaly, best effort.

    Never raises: failures of the sink, including warnings turned into errors
    by the active warning filters, are discarded.

    Args:
        logger: Logger or sink to use; without one a CacheItemWarning is emitted
        message: Message template with ``{name}`` placeholders
        context: Values for the placeholders and extra structured data
    """
    with contextlib.suppress(Exception):
        sink = select_sink(logger)
        sink.warning(message, context or {})
