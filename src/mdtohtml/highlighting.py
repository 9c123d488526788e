"""Syntax highlighting protocol and injection for mdtohtml.

Provides optional syntax highlighting for fenced code blocks.
When mdtohtml[syntax] is installed, Rosettes is used automatically.

Usage:
    # Automatic with mdtohtml[syntax]
    from mdtohtml import convert
    html = convert("```python\\nx = 1\\n```")

    # Manual injection
    from mdtohtml.highlighting import set_highlighter

    def my_highlighter(code: str, language: str) -> str:
        return f'<pre class="language-{language}"><code>{code}</code></pre>'

    set_highlighter(my_highlighter)

Highlighter output is trusted and never escaped. A complete block (starting
with ``<pre`` or ``<div``) replaces the whole code block; a fragment is placed
inside ``<pre><code class="language-X">``. Any exception raised by a
highlighter is handled by the renderer, which falls back to escaped plain
text.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Highlighters take code and language and return HTML markup
    with syntax highlighting applied.

    Thread Safety:
        Implementations must be thread-safe. The highlight() method
        may be called concurrently from multiple render threads.
    """

    def highlight(self, code: str, language: str) -> str:
        """Highlight code with syntax colors.

        Args:
            code: Source code to highlight
            language: Language identifier (e.g., "python", "js")

        Returns:
            HTML markup with highlighting; must escape HTML entities in code
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if highlighter supports the given language.

        Contract:
            - MUST NOT raise exceptions
            - SHOULD handle common aliases (js -> javascript)
        """
        ...


# Support for simple callable-based highlighters
SimpleHighlighter = Callable[[str, str], str]

# Global highlighter
_highlighter: Highlighter | SimpleHighlighter | None = None
_tried_rosettes: bool = False


def set_highlighter(highlighter: Highlighter | SimpleHighlighter | None) -> None:
    """Set the global syntax highlighter.

    Args:
        highlighter: A Highlighter protocol implementation, or a simple
            function that takes (code, language) and returns HTML.
            Pass None to clear the highlighter.
    """
    global _highlighter
    _highlighter = highlighter


def _try_import_rosettes() -> bool:
    """Try to import and configure Rosettes highlighter."""
    global _highlighter, _tried_rosettes

    if _tried_rosettes:
        return _highlighter is not None

    _tried_rosettes = True

    try:
        import rosettes  # type: ignore[import-not-found]
    except ImportError:
        logger.debug("rosettes is not installed; code blocks render as plain text")
        return False

    class RosettesHighlighter:
        """Rosettes-based syntax highlighter implementing Highlighter protocol."""

        def highlight(self, code: str, language: str) -> str:
            """Highlight code using Rosettes."""
            result: str = rosettes.highlight(code, language=language)
            return result

        def supports_language(self, language: str) -> bool:
            """Check if Rosettes supports the language."""
            try:
                result: bool = rosettes.supports_language(language)
                return result
            except Exception:
                return False

    _highlighter = RosettesHighlighter()
    return True


def get_highlighter() -> Highlighter | SimpleHighlighter | None:
    """Get the current highlighter instance.

    Returns:
        The configured highlighter, or None if not set.
        Automatically tries to load Rosettes if not already configured.
    """
    if _highlighter is None:
        _try_import_rosettes()
    return _highlighter


def has_highlighter() -> bool:
    """Check if a syntax highlighter is available."""
    return get_highlighter() is not None


def highlight(code: str, language: str) -> str | None:
    """Highlight code using the configured highlighter.

    Args:
        code: Source code to highlight
        language: Language identifier

    Returns:
        Highlighted HTML, or None when no highlighter is available or the
        highlighter does not support the language. Exceptions raised by the
        highlighter propagate to the caller.
    """
    highlighter = get_highlighter()
    if highlighter is None:
        return None

    # Check if it's the full protocol or a simple callable
    if hasattr(highlighter, "highlight") and callable(highlighter.highlight):
        if not highlighter.supports_language(language):
            return None
        return highlighter.highlight(code, language)

    return highlighter(code, language)
