"""Table row classifier mixin."""

from __future__ import annotations

from mdtohtml.parsing.charsets import TABLE_DELIMITER
from mdtohtml.tokens import Token, TokenType


class TableClassifierMixin:
    """Mixin providing pipe-table row classification."""

    def _make_token(self, token_type: TokenType, value: str, **fields: object) -> Token:
        """Create token at the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_table_row(self, content: str) -> Token | None:
        """Try to classify content as a table row.

        A row must both start and end with |. A line missing either pipe
        falls through to the next classifier.

        The pieces produced by the outer pipes are dropped; interior empty
        cells are kept so columns stay aligned:

            "| a || c |" -> ("a", "", "c")

        Args:
            content: Line content with surrounding whitespace stripped

        Returns:
            Token with cells populated, or None.
        """
        if not (content.startswith(TABLE_DELIMITER) and content.endswith(TABLE_DELIMITER)):
            return None

        parts = content.split(TABLE_DELIMITER)[1:-1]
        cells = tuple(part.strip() for part in parts)
        return self._make_token(TokenType.TABLE_ROW, content, cells=cells)
