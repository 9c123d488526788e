"""Thematic break classifier mixin."""

from __future__ import annotations

from mdtohtml.parsing.charsets import THEMATIC_BREAK_CHARS
from mdtohtml.tokens import Token, TokenType


class ThematicClassifierMixin:
    """Mixin providing thematic break classification."""

    def _make_token(self, token_type: TokenType, value: str, **fields: object) -> Token:
        """Create token at the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_thematic_break(self, content: str) -> Token | None:
        """Try to classify content as thematic break.

        Thematic breaks are 3+ characters drawn from -, * and _ with nothing
        else on the line. Spaces between markers are not allowed.

        Args:
            content: Line content with surrounding whitespace stripped

        Returns:
            Token if valid break, None otherwise.
        """
        if len(content) < 3:
            return None

        for char in content:
            if char not in THEMATIC_BREAK_CHARS:
                return None

        return self._make_token(TokenType.THEMATIC_BREAK, content)
