"""Tests for the top-level API: convert, parse, serialize, Markdown."""

import re

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import mdtohtml
from mdtohtml import (
    Document,
    InvalidInputError,
    Markdown,
    MdToHtmlError,
    RenderConfig,
    convert,
    parse,
    serialize,
    wrap_document,
)
from mdtohtml.highlighting import set_highlighter


def body_of(page: str) -> str:
    """Extract the rendered fragment from a full page."""
    match = re.search(r'<div class="container">\n        (.*)\n    </div>', page, re.DOTALL)
    assert match is not None, page
    return match.group(1)


class TestConvert:
    """convert() end to end."""

    def test_heading_only(self) -> None:
        body = body_of(convert("# Hello World"))
        assert body == "<h1>Hello World</h1>"
        assert body.count("<h1>Hello World</h1>") == 1

    def test_unicode_line_separators_do_not_split_blocks(self) -> None:
        assert body_of(convert("# caf\x85e")) == "<h1>caf\x85e</h1>"
        assert parse("```\na\x0cb\n```").children[0].code == "a\x0cb"  # type: ignore[union-attr]

    def test_inline_spans(self) -> None:
        body = body_of(convert("This is **bold** and *italic* and `code`."))
        assert body.count("<strong>bold</strong>") == 1
        assert body.count("<em>italic</em>") == 1
        assert body.count("<code>code</code>") == 1
        assert body.startswith("<p>This is ")
        assert body.endswith(".</p>")

    def test_code_block_without_highlight(self) -> None:
        page = convert("```js\nconst x = 1;\n```", {"highlight": False})
        assert '<pre><code class="language-js">const x = 1;</code></pre>' in page

    def test_highlight_option_uses_highlighter(self) -> None:
        set_highlighter(lambda code, lang: "<pre>HL</pre>")
        assert "<pre>HL</pre>" in convert("```js\nx\n```")
        assert "<pre>HL</pre>" not in convert("```js\nx\n```", {"highlight": False})

    def test_link(self) -> None:
        assert '<a href="u">A</a>' in convert("[A](u)")

    def test_list(self) -> None:
        body = body_of(convert("- item\n- item"))
        assert body.count("<ul>") == 1
        assert body.count("<li>") == 2

    def test_table(self) -> None:
        body = body_of(convert("| a | b |\n| 1 | 2 |\n| 3 | 4 |"))
        assert body.count("<tr>") == 3
        assert body.count("<th>") == 2
        assert body.index("<th>") < body.index("<td>")

    def test_empty_text(self) -> None:
        page = convert("")
        assert page.startswith("<!DOCTYPE html>")
        assert body_of(page) == ""


class TestPageShell:
    """Document wrapper and options."""

    def test_default_shell(self) -> None:
        page = convert("x")
        assert page.startswith("<!DOCTYPE html>\n")
        assert '<html lang="en" class="light-theme">' in page
        assert '<meta charset="UTF-8">' in page
        assert '<meta name="viewport" content="width=device-width, initial-scale=1.0">' in page
        assert "<title>Markdown Document</title>" in page
        assert '<link rel="stylesheet" href="styles.css">' in page
        assert page.endswith("</html>")

    def test_dark_theme(self) -> None:
        assert 'class="dark-theme"' in convert("x", {"theme": "dark"})

    def test_unknown_theme_is_light(self) -> None:
        assert 'class="light-theme"' in convert("x", {"theme": "neon"})

    def test_unknown_options_ignored(self) -> None:
        assert convert("x", {"toc": True, "minify": True}) == convert("x")

    def test_title_and_stylesheet_escaped(self) -> None:
        page = convert("x", RenderConfig(title="A <b> & C", stylesheet='x".css'))
        assert "<title>A &lt;b&gt; &amp; C</title>" in page
        assert 'href="x&quot;.css"' in page

    def test_wrap_document(self) -> None:
        page = wrap_document("<p>hi</p>", RenderConfig(theme="dark"))
        assert body_of(page) == "<p>hi</p>"
        assert 'class="dark-theme"' in page

    def test_serialize_matches_convert(self) -> None:
        source = "# T\n\n- a"
        assert serialize(parse(source), {"theme": "dark"}) == convert(source, {"theme": "dark"})


class TestInvalidInput:
    """Non-text input is the only hard failure."""

    @pytest.mark.parametrize("value", [None, 42, b"# bytes", ["# list"]])
    def test_convert_rejects_non_str(self, value: object) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            convert(value)  # type: ignore[arg-type]
        assert exc_info.value.received_type == type(value).__name__

    def test_is_type_error_and_package_error(self) -> None:
        with pytest.raises(TypeError):
            parse(None)  # type: ignore[arg-type]
        with pytest.raises(MdToHtmlError):
            parse(3.5)  # type: ignore[arg-type]

    def test_message_names_type(self) -> None:
        with pytest.raises(InvalidInputError, match="got int"):
            convert(1)  # type: ignore[arg-type]


class TestNeverRaises:
    """Malformed Markdown degrades instead of failing."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_convert_any_text(self, source: str) -> None:
        page = convert(source, {"highlight": False})
        assert page.startswith("<!DOCTYPE html>")

    @given(st.text(alphabet="#>-*_+|`[]()!.1 \nab<&", max_size=300))
    @settings(max_examples=200)
    def test_markdown_heavy_text(self, source: str) -> None:
        doc = parse(source)
        assert isinstance(doc, Document)
        assert "<script" not in convert("<script>" + source, {"highlight": False})


class TestMarkdownProcessor:
    """The reusable Markdown class."""

    def test_call(self) -> None:
        md = Markdown({"theme": "dark", "highlight": False})
        page = md("# Hi")
        assert "<h1>Hi</h1>" in page
        assert 'class="dark-theme"' in page

    def test_parse_and_render(self) -> None:
        md = Markdown()
        doc = md.parse("# Heading")
        assert doc.children[0].level == 1  # type: ignore[union-attr]
        assert md.render(doc) == convert("# Heading")

    def test_config_property(self) -> None:
        config = RenderConfig(title="T")
        assert Markdown(config).config is config

    def test_rejects_non_str(self) -> None:
        with pytest.raises(InvalidInputError):
            Markdown()(None)  # type: ignore[arg-type]


def test_version() -> None:
    assert mdtohtml.__version__ == "0.1.0"
