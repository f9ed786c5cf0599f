"""Unit tests for diagnostic delivery."""

from __future__ import annotations

import logging
import warnings
from unittest.mock import Mock

import pytest
from cache_item.domain.interfaces import DiagnosticSink
from cache_item.infrastructure.diagnostics import (
    CacheItemWarning,
    ContextSink,
    LoggerSink,
    WarningSink,
    emit_diagnostic,
    interpolate,
    select_sink,
)
from cache_item.infrastructure.logging import get_logger


class RecordingTarget:
    """Collects diagnostics without subclassing DiagnosticSink."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict]] = []

    def warning(self, message: str, context: dict) -> None:
        self.calls.append((message, context))


class TestInterpolate:
    """Test placeholder substitution."""

    def test_scalar_values(self) -> None:
        """Test scalars replace their placeholders."""
        message = interpolate(
            "Failed to unserialize key {key} after {tries} tries ({ratio}, {strict})",
            {"key": "user.42", "tries": 3, "ratio": 0.5, "strict": True},
        )
        assert message == "Failed to unserialize key user.42 after 3 tries (0.5, True)"

    def test_non_scalar_left_untouched(self) -> None:
        """Test containers, objects and None keep their placeholder."""
        message = interpolate(
            "{exception} on {keys} with {value}",
            {"exception": ValueError("boom"), "keys": ["a", "b"], "value": None},
        )
        assert message == "{exception} on {keys} with {value}"

    def test_unknown_placeholder(self) -> None:
        """Test placeholders without context entries stay as-is."""
        assert interpolate("Missing {nothing}", {}) == "Missing {nothing}"

    def test_no_placeholders(self) -> None:
        """Test messages without placeholders are returned unchanged."""
        assert interpolate("Plain message", {"key": "k"}) == "Plain message"


class TestSelectSink:
    """Test sink selection."""

    def test_logger_selects_logger_sink(self) -> None:
        """Test a logger is wrapped in a LoggerSink."""
        logger = get_logger("test.diagnostics")
        sink = select_sink(logger)

        assert isinstance(sink, LoggerSink)
        assert sink.logger is logger

    def test_logger_adapter_selects_logger_sink(self) -> None:
        """Test logger adapters are accepted."""
        adapter = logging.LoggerAdapter(get_logger("test.diagnostics"), {"pool": "app"})
        assert isinstance(select_sink(adapter), LoggerSink)

    def test_none_selects_warning_sink(self) -> None:
        """Test the plain-text fallback is used without a logger."""
        assert isinstance(select_sink(None), WarningSink)

    def test_sink_passes_through(self) -> None:
        """Test a ready-made sink is used as-is."""
        sink = WarningSink()
        assert select_sink(sink) is sink

    def test_object_with_warning_selects_context_sink(self) -> None:
        """Test objects offering warning(message, context) are wrapped as such."""
        target = RecordingTarget()
        sink = select_sink(target)

        assert isinstance(sink, ContextSink)
        assert sink.target is target

    def test_object_without_warning_rejected(self) -> None:
        """Test objects that cannot receive diagnostics are refused."""
        with pytest.raises(TypeError, match="Diagnostic sink must provide warning\(\)"):
            select_sink(object())

    def test_warning_sink_stacklevel(self) -> None:
        """Test the stacklevel reaches the selected WarningSink."""
        sink = select_sink(None, stacklevel=2)

        with pytest.warns(CacheItemWarning) as record:
            sink.warning("Pool degraded", {})

        assert record[0].filename == __file__


class TestEmitDiagnostic:
    """Test the best-effort diagnostic helper."""

    def test_logger_receives_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test a logger gets a WARNING record with the context attached."""
        logger = get_logger("test.diagnostics.logger")
        context = {"key": "user.42", "exception": ValueError("bad payload")}

        with caplog.at_level(logging.WARNING, logger="test.diagnostics.logger"):
            emit_diagnostic(logger, "Failed to unserialize key {key}", context)

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "Failed to unserialize key user.42"
        assert record.template == "Failed to unserialize key {key}"
        assert record.context == context

    def test_no_logger_emits_warning(self) -> None:
        """Test the fallback raises a CacheItemWarning with interpolated text."""
        with pytest.warns(CacheItemWarning, match="Failed to save key user.42 \\(array\\)"):
            emit_diagnostic(
                None, "Failed to save key {key} ({type})", {"key": "user.42", "type": "array"}
            )

    def test_no_context(self) -> None:
        """Test the context mapping is optional."""
        with pytest.warns(CacheItemWarning, match="Cache pool degraded"):
            emit_diagnostic(None, "Cache pool degraded")

    def test_warning_filter_error_does_not_raise(self) -> None:
        """Test warnings escalated to errors are swallowed."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            emit_diagnostic(None, "Failed to save key {key}", {"key": "k"})

    def test_failing_sink_does_not_raise(self) -> None:
        """Test sink failures never reach the caller."""
        sink = Mock(spec=DiagnosticSink)
        sink.warning.side_effect = RuntimeError("sink down")

        emit_diagnostic(sink, "Failed to save key {key}", {"key": "k"})

        sink.warning.assert_called_once_with("Failed to save key {key}", {"key": "k"})

    def test_failing_logger_does_not_raise(self) -> None:
        """Test logger failures never reach the caller."""
        logger = Mock(spec=logging.Logger)
        logger.warning.side_effect = OSError("disk full")

        emit_diagnostic(logger, "Failed to save key {key}", {"key": "k"})

        logger.warning.assert_called_once()

    def test_object_with_warning_receives_context(self) -> None:
        """Test plain objects get the raw template and context mapping."""
        target = RecordingTarget()

        emit_diagnostic(target, "Failed to unserialize key {key}", {"key": "k"})

        assert target.calls == [("Failed to unserialize key {key}", {"key": "k"})]

    def test_unusable_logger_does_not_raise(self) -> None:
        """Test an object without warning() is ignored instead of raising."""
        emit_diagnostic(object(), "Failed to save key {key}", {"key": "k"})

    def test_warning_points_at_caller(self) -> None:
        """Test the fallback warning is attributed to the calling code."""
        with pytest.warns(CacheItemWarning) as record:
            emit_diagnostic(None, "Failed to save key {key}", {"key": "k"})

        assert record[0].filename == __file__
