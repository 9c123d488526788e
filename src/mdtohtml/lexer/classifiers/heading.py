"""ATX heading classifier mixin."""

from mdtohtml.tokens import Token, TokenType


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

    def _make_token(self, token_type: TokenType, value: str, **fields: object) -> Token:
        """Create token at the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_atx_heading(self, content: str) -> Token | None:
        """Try to classify content as ATX heading.

        ATX headings start with 1-6 # characters followed by at least one
        whitespace character and non-empty text. Seven or more # characters
        make the line a paragraph.

        Args:
            content: Line content with surrounding whitespace stripped

        Returns:
            Token if valid heading, None otherwise.
        """
        level = 0
        content_len = len(content)
        while level < content_len and content[level] == "#":
            level += 1

        if level == 0 or level > 6:
            return None

        rest = content[level:]
        if not rest or not rest[0].isspace():
            return None

        text = rest.lstrip()
        if not text:
            return None

        return self._make_token(TokenType.ATX_HEADING, text, level=level)
