"""Exception classes for mdtohtml.

The conversion core only raises for values that are not text at all.
Malformed Markdown never raises; it degrades to literal text.
"""

from __future__ import annotations

from pathlib import Path


class MdToHtmlError(Exception):
    """Base exception for all mdtohtml errors."""

    pass


class InvalidInputError(MdToHtmlError, TypeError):
    """The conversion entry point received a non-string value.

    Subclasses TypeError so callers that already guard against type errors
    keep working.
    """

    def __init__(self, value: object) -> None:
        """Initialize with the offending value.

        Args:
            value: The object that was passed instead of a string
        """
        self.received_type = type(value).__name__
        super().__init__(f"Expected Markdown text as str, got {self.received_type}")


class ConversionError(MdToHtmlError):
    """A file could not be read or written during conversion.

    Raised by the file helpers in ``mdtohtml.converter``; the underlying
    OSError or UnicodeDecodeError is chained as ``__cause__``.
    """

    def __init__(self, path: str | Path, message: str) -> None:
        """Initialize conversion error.

        Args:
            path: File that failed
            message: Description of the failure
        """
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")
