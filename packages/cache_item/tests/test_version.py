"""Tests for version module."""

import cache_item
from cache_item.version import __version__


def test_version_format() -> None:
    """Test that version is in expected format."""
    assert isinstance(__version__, str)
    assert __version__ == "0.1.0"

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_version_exported() -> None:
    """Test that the package exposes its version."""
    assert cache_item.__version__ == __version__
