"""Shared fixtures for mdtohtml tests."""

from collections.abc import Iterator

import pytest

from mdtohtml import highlighting
from mdtohtml.config import reset_render_config
from mdtohtml.utils.logger import reset_logging


@pytest.fixture(autouse=True)
def isolated_highlighter(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test with no highlighter and no Rosettes auto-discovery.

    Tests that exercise highlighting inject their own highlighter with
    set_highlighter().
    """
    monkeypatch.setattr(highlighting, "_highlighter", None)
    monkeypatch.setattr(highlighting, "_tried_rosettes", True)
    yield
    reset_render_config()


@pytest.fixture(autouse=True)
def isolated_logging() -> Iterator[None]:
    """Drop any handler the CLI attached to the package logger."""
    yield
    reset_logging()
