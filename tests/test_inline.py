"""Tests for inline span resolution."""

import pytest

from mdtohtml.nodes import CodeSpan, Emphasis, Image, Link, Strong, Text
from mdtohtml.parsing import resolve_inline


class TestPlainText:
    """Text without markers."""

    def test_empty(self) -> None:
        assert resolve_inline("") == ()

    def test_plain(self) -> None:
        assert resolve_inline("just words") == (Text("just words"),)


class TestSpans:
    """Each span kind on its own and mixed with text."""

    def test_mixed_spans(self) -> None:
        assert resolve_inline("a **b** `c`") == (
            Text("a "),
            Strong((Text("b"),)),
            Text(" "),
            CodeSpan("c"),
        )

    def test_emphasis(self) -> None:
        assert resolve_inline("*it*") == (Emphasis((Text("it"),)),)

    def test_code_span_is_verbatim(self) -> None:
        assert resolve_inline("`a *b* [c](d)`") == (CodeSpan("a *b* [c](d)"),)

    def test_image(self) -> None:
        assert resolve_inline("![alt text](img.png)") == (Image(src="img.png", alt="alt text"),)

    def test_image_with_empty_alt(self) -> None:
        assert resolve_inline("![](x.png)") == (Image(src="x.png", alt=""),)

    def test_link(self) -> None:
        assert resolve_inline("[A](u)") == (Link(url="u", children=(Text("A"),)),)

    def test_link_and_image_in_text(self) -> None:
        assert resolve_inline("see [x](y) and ![i](j)") == (
            Text("see "),
            Link(url="y", children=(Text("x"),)),
            Text(" and "),
            Image(src="j", alt="i"),
        )

    def test_bold_italic_code_sentence(self) -> None:
        children = resolve_inline("This is **bold** and *italic* and `code`.")
        assert children == (
            Text("This is "),
            Strong((Text("bold"),)),
            Text(" and "),
            Emphasis((Text("italic"),)),
            Text(" and "),
            CodeSpan("code"),
            Text("."),
        )


class TestNoNesting:
    """Span contents stay literal."""

    def test_link_label_not_parsed(self) -> None:
        assert resolve_inline("[*a*](u)") == (Link(url="u", children=(Text("*a*"),)),)

    def test_strong_content_not_parsed(self) -> None:
        assert resolve_inline("**a `b` c**") == (Strong((Text("a `b` c"),)),)

    def test_first_closer_wins(self) -> None:
        assert resolve_inline("**a*b**c*") == (Strong((Text("a*b"),)), Text("c*"))

    def test_empty_strong(self) -> None:
        assert resolve_inline("****") == (Strong(()),)


class TestUnmatchedMarkers:
    """Markers without a valid closer are kept as literal text."""

    @pytest.mark.parametrize(
        "source",
        [
            "**unclosed",
            "*a**b",
            "`unclosed",
            "[A] (u)",
            "[a](b",
            "[no target]",
            "!not an image",
            "2 * 3",
        ],
    )
    def test_literal(self, source: str) -> None:
        assert resolve_inline(source) == (Text(source),)

    def test_unmatched_marker_merges_with_following_span(self) -> None:
        assert resolve_inline("! [a](b)") == (Text("! "), Link(url="b", children=(Text("a"),)))
