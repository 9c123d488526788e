"""Block quote classifier mixin."""

from mdtohtml.parsing.charsets import BLOCK_QUOTE_MARKER
from mdtohtml.tokens import Token, TokenType


class QuoteClassifierMixin:
    """Mixin providing block quote classification."""

    def _make_token(self, token_type: TokenType, value: str, **fields: object) -> Token:
        """Create token at the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_block_quote(self, content: str) -> Token | None:
        """Classify a line starting with > as a block quote.

        Each quoted line is its own token; the parser does not merge them.
        A bare ">" yields an empty quote.
        """
        if not content.startswith(BLOCK_QUOTE_MARKER):
            return None
        return self._make_token(TokenType.BLOCK_QUOTE, content[1:].strip())
