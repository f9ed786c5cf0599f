"""Abstract interface for diagnostic delivery."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class DiagnosticSink(ABC):
    """Destination for recoverable anomalies reported by cache collaborators.

    Messages use ``{name}`` placeholders that refer to keys of the context
    mapping. Implementations decide whether the context is kept structured or
    rendered into the text.
    """

    @abstractmethod
    def warning(self, message: str, context: Mapping[str, Any]) -> None:
        """Deliver a warning.

        Args:
            message: Message template with ``{name}`` placeholders
            context: Values referenced by the template, plus any extra data
        """
        ...
