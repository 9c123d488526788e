"""Tests for escape_html()."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdtohtml.utils.text import escape_html


class TestEscapeHtml:
    """Entity replacement."""

    @pytest.mark.parametrize(
        "raw,escaped",
        [
            ("<", "&lt;"),
            (">", "&gt;"),
            ("&", "&amp;"),
            ('"', "&quot;"),
            ("'", "&#39;"),
            ("", ""),
            ("plain", "plain"),
        ],
    )
    def test_single_characters(self, raw: str, escaped: str) -> None:
        assert escape_html(raw) == escaped

    def test_ampersand_first(self) -> None:
        assert escape_html("<&>") == "&lt;&amp;&gt;"

    def test_not_idempotent(self) -> None:
        assert escape_html(escape_html("<")) == "&amp;lt;"

    @given(st.text())
    def test_no_raw_specials_remain(self, text: str) -> None:
        escaped = escape_html(text)
        for char in "<>\"'":
            assert char not in escaped
