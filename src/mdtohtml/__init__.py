"""
mdtohtml — Markdown to standalone HTML pages

Converts a practical subset of Markdown (ATX headings, fenced code, lists,
block quotes, thematic breaks, pipe tables, emphasis, code spans, links and
images) into a complete, styled HTML document.

Quick Start:
    >>> from mdtohtml import convert
    >>> html = convert("# Hello **World**", {"theme": "dark"})

    >>> # Or work with the tree
    >>> from mdtohtml import parse, HtmlRenderer
    >>> doc = parse("# Hello")
    >>> HtmlRenderer(highlight=False).render(doc)
    '<h1>Hello</h1>'

    >>> # Reusable processor
    >>> from mdtohtml import Markdown
    >>> md = Markdown({"theme": "dark"})
    >>> page = md("- one\\n- two")

Installation:
    pip install mdtohtml              # Core converter and CLI
    pip install mdtohtml[syntax]      # + Syntax highlighting via Rosettes
"""

from collections.abc import Mapping
from typing import Any, TypeAlias

from mdtohtml.config import (
    RenderConfig,
    coerce_options,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from mdtohtml.errors import ConversionError, InvalidInputError, MdToHtmlError
from mdtohtml.highlighting import Highlighter, set_highlighter
from mdtohtml.lexer import Lexer, tokenize
from mdtohtml.nodes import (
    Block,
    BlockQuote,
    CodeSpan,
    Document,
    Emphasis,
    FencedCode,
    Heading,
    Image,
    Inline,
    Link,
    List,
    ListItem,
    Paragraph,
    Strong,
    Table,
    TableRow,
    Text,
    ThematicBreak,
)
from mdtohtml.parser import Parser, build_tree
from mdtohtml.renderers import HtmlRenderer, serialize, wrap_document
from mdtohtml.tokens import Token, TokenType
from mdtohtml.utils.text import escape_html

__version__ = "0.1.0"

Options: TypeAlias = RenderConfig | Mapping[str, Any] | None


def _require_text(value: object) -> str:
    """Return value if it is a str, else raise InvalidInputError."""
    if not isinstance(value, str):
        raise InvalidInputError(value)
    return value


def parse(source: str) -> Document:
    """Parse Markdown source into a typed AST.

    Args:
        source: Markdown source text

    Returns:
        Document AST root node

    Raises:
        InvalidInputError: If source is not a str

    Example:
        >>> doc = parse("# Hello **World**")
        >>> doc.children[0].level
        1
    """
    return build_tree(tokenize(_require_text(source)))


def convert(markdown_text: str, options: Options = None) -> str:
    """Convert Markdown text into a complete HTML document.

    Args:
        markdown_text: Markdown source text
        options: RenderConfig or mapping with ``highlight``, ``theme``,
            ``title`` and ``stylesheet`` keys; unknown keys are ignored

    Returns:
        Standalone HTML page

    Raises:
        InvalidInputError: If markdown_text is not a str. Malformed markup
            never raises.
    """
    return serialize(parse(markdown_text), options)


class Markdown:
    """Reusable Markdown processor bound to one render configuration.

    Usage:
        >>> md = Markdown({"highlight": False})
        >>> page = md("# Hello **World**")

        >>> # Access the AST
        >>> doc = md.parse("# Heading")
        >>> doc.children[0].level
        1

    Thread Safety:
        Holds only an immutable RenderConfig and scopes it per call via
        ContextVar. Safe to share across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, options: Options = None) -> None:
        """Initialize Markdown processor.

        Args:
            options: RenderConfig or mapping of its fields
        """
        self._config = coerce_options(options)

    @property
    def config(self) -> RenderConfig:
        """Render configuration used by this processor."""
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render Markdown in one call.

        Args:
            source: Markdown source text

        Returns:
            Standalone HTML page
        """
        return self.render(self.parse(source))

    def parse(self, source: str) -> Document:
        """Parse Markdown source into AST."""
        return parse(source)

    def render(self, doc: Document) -> str:
        """Render a Document to a standalone HTML page."""
        return serialize(doc, self._config)


__all__ = [
    # Main API
    "convert",
    "parse",
    "serialize",
    "wrap_document",
    "Markdown",
    # Pipeline stages
    "Lexer",
    "Parser",
    "HtmlRenderer",
    "tokenize",
    "build_tree",
    # Configuration
    "RenderConfig",
    "coerce_options",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Highlighting
    "Highlighter",
    "set_highlighter",
    # Errors
    "MdToHtmlError",
    "InvalidInputError",
    "ConversionError",
    # Tokens
    "Token",
    "TokenType",
    # Nodes
    "Block",
    "Inline",
    "Document",
    "Heading",
    "Paragraph",
    "FencedCode",
    "List",
    "ListItem",
    "BlockQuote",
    "ThematicBreak",
    "Table",
    "TableRow",
    "Text",
    "Strong",
    "Emphasis",
    "CodeSpan",
    "Link",
    "Image",
    # Utilities
    "escape_html",
]
