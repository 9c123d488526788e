"""Text processing utilities for mdtohtml."""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters for text and attribute values.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#39;

    Escaping is not idempotent: an already escaped string is escaped again.

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text

    Examples:
        >>> escape_html("<b>")
        '&lt;b&gt;'
        >>> escape_html("&lt;")
        '&amp;lt;'
    """
    if not text:
        return ""

    escaped = html_module.escape(text, quote=True)
    return escaped.replace("&#x27;", "&#39;")
