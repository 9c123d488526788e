"""Single-pass parser producing typed AST.

Consumes the token list from Lexer and builds typed AST nodes.
Produces immutable (frozen) dataclass nodes for thread-safety.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal
- `InlineParsingMixin`: Inline spans (emphasis, links, code spans)
- `BlockParsingMixin`: Block-level content (paragraphs, lists, tables)

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Parser instances are single-use; the cursor never leaves the instance
- Safe to share AST across threads

"""

from __future__ import annotations

from collections.abc import Sequence

from mdtohtml.nodes import Block, Document
from mdtohtml.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    TokenNavigationMixin,
)
from mdtohtml.tokens import Token


class Parser(
    TokenNavigationMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Forward-cursor parser for line tokens.

    Usage:
            >>> from mdtohtml.lexer import tokenize
            >>> doc = Parser(tokenize("# Hello\n\nWorld")).parse()
            >>> doc.children[0]
        Heading(level=1, content='Hello', children=(Text(content='Hello'),))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The resulting AST is immutable and thread-safe.

    """

    __slots__ = (
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
    )

    def __init__(self, tokens: Sequence[Token]) -> None:
        """Initialize parser with a token sequence.

        Args:
            tokens: Tokens in document order, as produced by Lexer

        """
        self._tokens = tokens
        self._tokens_len = len(tokens)
        self._pos = 0
        self._current: Token | None = tokens[0] if tokens else None

    def parse(self) -> Document:
        """Parse tokens into a Document.

        Returns:
            Document root holding the top-level blocks

        Thread Safety:
            Returns immutable AST (frozen dataclasses).
        """
        blocks: list[Block] = []
        while not self._at_end():
            block = self._parse_block()
            if block is not None:
                blocks.append(block)

        return Document(children=tuple(blocks))


def build_tree(tokens: Sequence[Token]) -> Document:
    """Build a Document from lexer tokens.

    Never fails on lexer output.
    """
    return Parser(tokens).parse()
