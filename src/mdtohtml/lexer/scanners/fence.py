"""Fenced code scanner mixin."""

from mdtohtml.tokens import Token, TokenType


class FenceScannerMixin:
    """Mixin providing fenced code consumption.

    Unlike the other scanners this one moves the position over several
    lines at once: everything from the opening fence through the closing
    fence (or end of input) becomes a single FENCED_CODE token.

    """

    # These will be set by the Lexer class
    _lines: list[str]
    _pos: int

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line is a closing fence. Implemented by FenceClassifierMixin."""
        raise NotImplementedError

    def _scan_fenced_code(self, language: str) -> Token:
        """Consume a fenced code block starting at the current line.

        Content lines are kept verbatim (no trimming, no escaping). A fence
        without a closing line runs to end of input.

        Args:
            language: Language tag from the opening fence

        Returns:
            FENCED_CODE token spanning the consumed lines
        """
        start = self._pos
        lines = self._lines
        lines_len = len(lines)

        end = start + 1
        while end < lines_len and not self._is_closing_fence(lines[end]):
            end += 1

        code = "\n".join(lines[start + 1 : end])

        # Include the closing fence in the span when there is one
        consumed = end + 1 if end < lines_len else end
        token = Token(
            type=TokenType.FENCED_CODE,
            value=code,
            language=language,
            lineno=start,
            line_count=consumed - start,
        )
        self._pos = consumed
        return token
