"""Line-oriented lexer for mdtohtml.

Scans the source one physical line at a time, classifies the line, then
commits position. Only fenced code consumes more than one line.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from mdtohtml.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    TableClassifierMixin,
    ThematicClassifierMixin,
)
from mdtohtml.lexer.scanners import (
    BlockScannerMixin,
    FenceScannerMixin,
)
from mdtohtml.tokens import Token, TokenType


def split_lines(source: str) -> list[str]:
    """Split source into physical lines on "\\n" only.

    A trailing "\\r" is removed from each line. Other characters that
    str.splitlines() treats as breaks (form feed, NEL, U+2028) stay inside
    the line. A trailing newline adds no empty line, and "" has no lines.
    """
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


class Lexer(
    # Classifiers (pure logic, no position mutation)
    HeadingClassifierMixin,
    FenceClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
    TableClassifierMixin,
    # Scanners (position-moving logic); FenceScannerMixin must precede
    # BlockScannerMixin, which only declares _scan_fenced_code
    FenceScannerMixin,
    BlockScannerMixin,
):
    """Line-oriented lexer.

    Usage:
            >>> lexer = Lexer("# Hello\n\nWorld")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(ATX_HEADING, 'Hello', 0)
        Token(BLANK_LINE, '', 1)
        Token(PARAGRAPH_LINE, 'World', 2)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_lines",
        "_pos",  # Index of the current line
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
        """
        self._lines = split_lines(source)
        self._pos = 0

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, in document order

        Complexity: O(n) where n = len(source)
        """
        lines_len = len(self._lines)
        while self._pos < lines_len:
            yield from self._scan_block()

    def _commit_line(self) -> None:
        """Advance past the current line."""
        self._pos += 1

    def _make_token(self, token_type: TokenType, value: str, **fields: object) -> Token:
        """Create a Token for the current line.

        Args:
            token_type: The token type.
            value: Content with block markers stripped.
            **fields: Extra Token fields (level, language, cells).

        Returns:
            Token positioned at the current line.
        """
        return Token(type=token_type, value=value, lineno=self._pos, **fields)  # type: ignore[arg-type]


def tokenize(text: str) -> list[Token]:
    """Tokenize Markdown text into a list of line tokens.

    Never fails; empty input produces an empty list.

    Example:
        >>> [t.type.name for t in tokenize("# Title\\n- a\\n- b")]
        ['ATX_HEADING', 'LIST_ITEM', 'LIST_ITEM']
    """
    return list(Lexer(text).tokenize())
