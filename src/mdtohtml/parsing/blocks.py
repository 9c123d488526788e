"""Block parsing for mdtohtml parser.

Provides block dispatch and the per-kind block builders.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from mdtohtml.nodes import (
    Block,
    BlockQuote,
    FencedCode,
    Heading,
    Inline,
    List,
    ListItem,
    Paragraph,
    Table,
    TableRow,
    ThematicBreak,
)
from mdtohtml.tokens import Token, TokenType

if TYPE_CHECKING:
    from typing import Literal


class BlockParsingMixin:
    """Block parsing methods.

    Required Host Attributes:
        - _current: Token | None

    Required Host Methods:
        - _advance() -> Token | None
        - _consume_run(token_type) -> list[Token]
        - _parse_inline(text) -> tuple[Inline, ...]

    """

    _current: Token | None

    def _advance(self) -> Token | None:
        raise NotImplementedError

    def _consume_run(self, token_type: TokenType) -> list[Token]:
        raise NotImplementedError

    def _parse_inline(self, text: str) -> tuple[Inline, ...]:
        raise NotImplementedError

    def _parse_block(self) -> Block | None:
        """Parse one block starting at the current token.

        Always consumes at least one token. Returns None for tokens that
        produce no node (blank lines).
        """
        token = self._current
        if token is None:
            return None

        match token.type:
            case TokenType.ATX_HEADING:
                return self._parse_atx_heading()
            case TokenType.FENCED_CODE:
                return self._parse_fenced_code()
            case TokenType.LIST_ITEM:
                return self._parse_list(TokenType.LIST_ITEM, ordered=False)
            case TokenType.ORDERED_LIST_ITEM:
                return self._parse_list(TokenType.ORDERED_LIST_ITEM, ordered=True)
            case TokenType.BLOCK_QUOTE:
                return self._parse_block_quote()
            case TokenType.THEMATIC_BREAK:
                self._advance()
                return ThematicBreak()
            case TokenType.TABLE_ROW:
                return self._parse_table()
            case TokenType.BLANK_LINE:
                self._advance()
                return None
            case TokenType.PARAGRAPH_LINE:
                return self._parse_paragraph()

        # Unreachable for lexer output; keep the cursor moving regardless
        self._advance()
        return None

    def _parse_atx_heading(self) -> Heading:
        """Parse ATX heading."""
        token = cast(Token, self._advance())
        level = cast("Literal[1, 2, 3, 4, 5, 6]", token.level)
        return Heading(level=level, content=token.value, children=self._parse_inline(token.value))

    def _parse_fenced_code(self) -> FencedCode:
        """Parse fenced code; the code is kept verbatim."""
        token = cast(Token, self._advance())
        return FencedCode(code=token.value, language=token.language)

    def _parse_list(self, item_type: TokenType, *, ordered: bool) -> List:
        """Group a run of list item tokens of one kind into a List.

        The run ends at the first token of any other type, so a bullet item
        followed directly by a numbered item starts a second list.
        """
        items = tuple(
            ListItem(content=token.value, children=self._parse_inline(token.value))
            for token in self._consume_run(item_type)
        )
        return List(items=items, ordered=ordered)

    def _parse_block_quote(self) -> BlockQuote:
        """Parse a single quoted line.

        Consecutive quote lines are not merged; each becomes its own node.
        """
        token = cast(Token, self._advance())
        return BlockQuote(content=token.value, children=self._parse_inline(token.value))

    def _parse_table(self) -> Table:
        """Group a run of table row tokens into a Table."""
        rows = tuple(TableRow(cells=token.cells) for token in self._consume_run(TokenType.TABLE_ROW))
        return Table(rows=rows)

    def _parse_paragraph(self) -> Paragraph:
        """Parse a paragraph line."""
        token = cast(Token, self._advance())
        return Paragraph(content=token.value, children=self._parse_inline(token.value))
