"""List marker classifier mixin."""

from __future__ import annotations

from mdtohtml.parsing.charsets import DIGITS, UNORDERED_LIST_MARKERS
from mdtohtml.tokens import Token, TokenType


class ListClassifierMixin:
    """Mixin providing list marker classification."""

    def _make_token(self, token_type: TokenType, value: str, **fields: object) -> Token:
        """Create token at the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_list_marker(self, content: str) -> Token | None:
        """Try to classify content as an unordered list item.

        A bullet (-, * or +) must be followed by whitespace and content.
        The token value is the content with the bullet and spacing removed.
        """
        if len(content) < 2 or content[0] not in UNORDERED_LIST_MARKERS:
            return None
        if not content[1].isspace():
            return None

        item = content[1:].lstrip()
        if not item:
            return None
        return self._make_token(TokenType.LIST_ITEM, item)

    def _try_classify_ordered_marker(self, content: str) -> Token | None:
        """Try to classify content as an ordered list item.

        Ordered markers are one or more digits followed by "." and whitespace.
        The number itself is not kept; ordered lists always count from 1.
        """
        pos = 0
        content_len = len(content)
        while pos < content_len and content[pos] in DIGITS:
            pos += 1

        if pos == 0 or pos + 1 >= content_len:
            return None
        if content[pos] != "." or not content[pos + 1].isspace():
            return None

        item = content[pos + 1 :].lstrip()
        if not item:
            return None
        return self._make_token(TokenType.ORDERED_LIST_ITEM, item)
