"""Token navigation utilities for mdtohtml parser.

Provides mixin for token stream navigation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdtohtml.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _tokens_len: int (cached len(_tokens) for hot loops)
        - _pos: int
        - _current: Token | None

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int
    _current: Token | None

    def _at_end(self) -> bool:
        """Check if at end of token stream."""
        return self._current is None

    def _advance(self) -> Token | None:
        """Advance to next token and return the token that was current."""
        token = self._current
        self._pos += 1
        if self._pos < self._tokens_len:
            self._current = self._tokens[self._pos]
        else:
            self._current = None
        return token

    def _consume_run(self, token_type: TokenType) -> list[Token]:
        """Consume the maximal run of consecutive tokens of one type."""
        run: list[Token] = []
        while self._current is not None and self._current.type is token_type:
            run.append(self._current)
            self._advance()
        return run
