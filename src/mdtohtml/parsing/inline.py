"""Inline span resolution for mdtohtml parser.

A single left-to-right scan over the text. Plain characters accumulate in a
pending buffer that is flushed to a Text node whenever a span is recognized.
At each position the span parsers are tried in a fixed order:

1. ``**strong**``
2. ``*emphasis*``
3. `` `code` ``
4. ``![alt](src)``
5. ``[label](url)``

Closing markers are searched with ``str.find``: the first candidate wins,
even when a later one would nest better (``**a*b**c*`` gives
Strong("a*b") followed by the literal text "c*"). A marker without a valid
closer is kept as literal text.

Span contents are not resolved recursively.

Thread Safety:
All functions are pure; no module state is mutated.

"""

from __future__ import annotations

from typing import TypeAlias

from mdtohtml.nodes import CodeSpan, Emphasis, Image, Inline, Link, Strong, Text
from mdtohtml.parsing.charsets import INLINE_SPECIAL

SpanMatch: TypeAlias = tuple[Inline, int]


def _literal(content: str) -> tuple[Inline, ...]:
    """Wrap span content as a single literal Text child (empty -> no child)."""
    return (Text(content),) if content else ()


def _try_parse_strong(text: str, pos: int) -> SpanMatch | None:
    """Parse ``**...**`` starting at pos."""
    if not text.startswith("**", pos):
        return None
    close = text.find("**", pos + 2)
    if close == -1:
        return None
    return Strong(_literal(text[pos + 2 : close])), close + 2


def _try_parse_emphasis(text: str, pos: int) -> SpanMatch | None:
    """Parse ``*...*`` starting at pos.

    The opener must not be followed by another asterisk and the first
    closing asterisk must not be doubled.
    """
    if text[pos] != "*" or text.startswith("*", pos + 1):
        return None
    close = text.find("*", pos + 1)
    if close == -1 or text.startswith("*", close + 1):
        return None
    return Emphasis(_literal(text[pos + 1 : close])), close + 1


def _try_parse_code_span(text: str, pos: int) -> SpanMatch | None:
    """Parse a single-backtick code span; content is kept verbatim."""
    if text[pos] != "`":
        return None
    close = text.find("`", pos + 1)
    if close == -1:
        return None
    return CodeSpan(text[pos + 1 : close]), close + 1


def _find_bracket_target(text: str, open_pos: int) -> tuple[str, str, int] | None:
    """Find ``[label](target)`` with the [ at open_pos.

    Returns:
        (label, target, end_pos) or None when the shape does not match.
    """
    label_end = text.find("]", open_pos + 1)
    if label_end == -1 or not text.startswith("(", label_end + 1):
        return None
    target_end = text.find(")", label_end + 2)
    if target_end == -1:
        return None
    return text[open_pos + 1 : label_end], text[label_end + 2 : target_end], target_end + 1


def _try_parse_image(text: str, pos: int) -> SpanMatch | None:
    """Parse ``![alt](src)`` starting at pos."""
    if not text.startswith("![", pos):
        return None
    found = _find_bracket_target(text, pos + 1)
    if found is None:
        return None
    alt, src, end = found
    return Image(src=src, alt=alt), end


def _try_parse_link(text: str, pos: int) -> SpanMatch | None:
    """Parse ``[label](url)`` starting at pos; the label stays literal."""
    if text[pos] != "[":
        return None
    found = _find_bracket_target(text, pos)
    if found is None:
        return None
    label, url, end = found
    return Link(url=url, children=_literal(label)), end


_SPAN_PARSERS = (
    _try_parse_strong,
    _try_parse_emphasis,
    _try_parse_code_span,
    _try_parse_image,
    _try_parse_link,
)


def resolve_inline(text: str) -> tuple[Inline, ...]:
    """Resolve inline spans in a block's text.

    Args:
        text: Raw text of a heading, paragraph, list item or quote

    Returns:
        Inline nodes in source order; empty tuple for empty text

    Example:
        >>> resolve_inline("a **b** `c`")
        (Text(content='a '), Strong(children=(Text(content='b'),)), Text(content=' '), CodeSpan(code='c'))
    """
    if not text:
        return ()

    children: list[Inline] = []
    buffer: list[str] = []
    pos = 0
    text_len = len(text)

    while pos < text_len:
        char = text[pos]

        if char in INLINE_SPECIAL:
            span = None
            for parser in _SPAN_PARSERS:
                span = parser(text, pos)
                if span is not None:
                    break
            if span is not None:
                if buffer:
                    children.append(Text("".join(buffer)))
                    buffer.clear()
                node, pos = span
                children.append(node)
                continue

        buffer.append(char)
        pos += 1

    if buffer:
        children.append(Text("".join(buffer)))

    return tuple(children)


class InlineParsingMixin:
    """Mixin exposing inline resolution to the parser.

    Required Host Attributes: None

    """

    def _parse_inline(self, text: str) -> tuple[Inline, ...]:
        """Resolve inline spans in text."""
        return resolve_inline(text)
