"""Block mode scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator

from mdtohtml.tokens import Token, TokenType


class BlockScannerMixin:
    """Mixin providing line classification in fixed priority order.

    Scans one line per call:
    1. Read the current line (window)
    2. Classify the trimmed line (pure logic, first match wins)
    3. Emit token and commit position (always advances)

    """

    # These will be set by the Lexer class
    _lines: list[str]
    _pos: int

    def _make_token(self, token_type: TokenType, value: str, **fields: object) -> Token:
        raise NotImplementedError

    def _commit_line(self) -> None:
        raise NotImplementedError

    # Classifier methods (provided by classifier mixins)
    def _try_classify_atx_heading(self, content: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_fence_start(self, content: str) -> str | None:
        raise NotImplementedError

    def _scan_fenced_code(self, language: str) -> Token:
        raise NotImplementedError

    def _try_classify_list_marker(self, content: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_ordered_marker(self, content: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_block_quote(self, content: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_thematic_break(self, content: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_table_row(self, content: str) -> Token | None:
        raise NotImplementedError

    def _scan_block(self) -> Iterator[Token]:
        """Classify the current line and yield its token."""
        line = self._lines[self._pos]
        content = line.strip()

        if not content:
            yield self._make_token(TokenType.BLANK_LINE, "")
            self._commit_line()
            return

        token = self._try_classify_atx_heading(content)
        if token is None:
            language = self._try_classify_fence_start(content)
            if language is not None:
                # Fence scanning commits its own span
                yield self._scan_fenced_code(language)
                return
            token = (
                self._try_classify_list_marker(content)
                or self._try_classify_ordered_marker(content)
                or self._try_classify_block_quote(content)
                or self._try_classify_thematic_break(content)
                or self._try_classify_table_row(content)
            )

        if token is None:
            token = self._make_token(TokenType.PARAGRAPH_LINE, line)

        yield token
        self._commit_line()
