"""HTML renderer for the mdtohtml AST.

Renders the typed AST to an HTML fragment by structural recursion: one case
per node type, children rendered in order and concatenated. Block elements
are separated by a newline.

Escaping:
Every Text leaf, attribute value (href, src, alt) and unhighlighted code
block passes through escape_html. Highlighter output is trusted and
inserted verbatim.

Thread Safety:
The renderer holds only immutable settings. Multiple threads can safely
share a single HtmlRenderer instance and call render() concurrently.
"""

from __future__ import annotations

import logging

from mdtohtml.config import get_render_config
from mdtohtml.highlighting import highlight as highlight_code
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
    Node,
    Paragraph,
    Strong,
    Table,
    TableRow,
    Text,
    ThematicBreak,
)
from mdtohtml.utils.text import escape_html

logger = logging.getLogger(__name__)

# Highlighter output starting with one of these is a complete code block
_BLOCK_PREFIXES = ("<pre", "<div")


class HtmlRenderer:
    """Render AST to an HTML fragment.

    Usage:
        >>> from mdtohtml import parse
        >>> doc = parse("# Hello **World**")
        >>> HtmlRenderer(highlight=False).render(doc)
        '<h1>Hello <strong>World</strong></h1>'

    Settings not passed explicitly are read from the active RenderConfig
    (see mdtohtml.config.render_config_context) at construction time.

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
    """

    __slots__ = ("_highlight",)

    def __init__(self, *, highlight: bool | None = None) -> None:
        """Initialize renderer.

        Args:
            highlight: Enable syntax highlighting for fenced code; defaults
                to the active RenderConfig's value
        """
        self._highlight = get_render_config().highlight if highlight is None else highlight

    def render(self, node: Document) -> str:
        """Render document AST to an HTML fragment.

        Args:
            node: Document AST root

        Returns:
            HTML string (no page shell)
        """
        return self._render_blocks(node.children)

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_blocks(self, blocks: tuple[Block, ...]) -> str:
        return "\n".join(self._render_block(block) for block in blocks)

    def _render_block(self, block: Block | Node) -> str:
        """Render a block node."""
        match block:
            case Heading():
                inner = self._render_inline_content(block.children, block.content)
                return f"<h{block.level}>{inner}</h{block.level}>"
            case Paragraph():
                return f"<p>{self._render_inline_content(block.children, block.content)}</p>"
            case FencedCode():
                return self._render_fenced_code(block)
            case List():
                return self._render_list(block)
            case ListItem():
                # Should be rendered by list, but handle standalone
                return self._render_list_item(block)
            case BlockQuote():
                inner = self._render_inline_content(block.children, block.content)
                return f"<blockquote>{inner}</blockquote>"
            case ThematicBreak():
                return "<hr>"
            case Table():
                return self._render_table(block)
            case TableRow():
                return self._render_table_row(block, "td")
            case Document():
                return self._render_blocks(block.children)
            case _:
                return self._render_unknown(block)

    def _render_fenced_code(self, code: FencedCode) -> str:
        """Render fenced code block, highlighted when possible.

        Highlighter output that is already a complete block (``<pre>`` or
        ``<div>``, as Rosettes returns) is inserted as-is. Fragment output,
        such as bare token spans, goes inside the language-tagged
        ``<pre><code>`` container the plain rendering uses.
        """
        lang = code.language.split()[0] if code.language.strip() else ""
        lang_class = f' class="language-{escape_html(lang)}"' if lang else ""

        if self._highlight and lang:
            try:
                highlighted = highlight_code(code.code, lang)
            except Exception:
                # Highlighter errors never escape the renderer
                logger.debug("Syntax highlighting failed for language %r", lang, exc_info=True)
                highlighted = None
            if highlighted is not None:
                if highlighted.lstrip().startswith(_BLOCK_PREFIXES):
                    return highlighted
                return f"<pre><code{lang_class}>{highlighted}</code></pre>"

        return f"<pre><code{lang_class}>{escape_html(code.code)}</code></pre>"

    def _render_list(self, lst: List) -> str:
        """Render ordered or unordered list."""
        tag = "ol" if lst.ordered else "ul"
        items = "\n".join(self._render_list_item(item) for item in lst.items)
        return f"<{tag}>\n{items}\n</{tag}>"

    def _render_list_item(self, item: ListItem) -> str:
        """Render list item, preferring resolved children over raw content."""
        return f"<li>{self._render_inline_content(item.children, item.content)}</li>"

    def _render_table(self, table: Table) -> str:
        """Render table; the first row is the header row."""
        if not table.rows:
            return ""

        rows = "\n".join(
            self._render_table_row(row, "th" if index == 0 else "td")
            for index, row in enumerate(table.rows)
        )
        return f"<table>\n{rows}\n</table>"

    def _render_table_row(self, row: TableRow, tag: str) -> str:
        """Render table row; cells are plain escaped text."""
        cells = "".join(f"<{tag}>{escape_html(cell)}</{tag}>" for cell in row.cells)
        return f"<tr>{cells}</tr>"

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inline_content(self, children: tuple[Inline, ...], content: str) -> str:
        """Render resolved children, or the escaped raw content without them."""
        if children:
            return self._render_inlines(children)
        return escape_html(content)

    def _render_inlines(self, inlines: tuple[Inline, ...]) -> str:
        """Render a sequence of inline nodes."""
        return "".join(self._render_inline(inline) for inline in inlines)

    def _render_inline(self, inline: Inline | Node) -> str:
        """Render an inline node."""
        match inline:
            case Text():
                return escape_html(inline.content)
            case Strong():
                return f"<strong>{self._render_inlines(inline.children)}</strong>"
            case Emphasis():
                return f"<em>{self._render_inlines(inline.children)}</em>"
            case CodeSpan():
                return f"<code>{escape_html(inline.code)}</code>"
            case Link():
                href = escape_html(inline.url)
                return f'<a href="{href}">{self._render_inlines(inline.children)}</a>'
            case Image():
                src = escape_html(inline.src)
                alt = escape_html(inline.alt)
                return f'<img src="{src}" alt="{alt}" />'
            case _:
                return self._render_unknown(inline)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _render_unknown(self, node: object) -> str:
        """Render a node of unknown type as its escaped content, if any."""
        content = getattr(node, "content", None)
        if isinstance(content, str):
            return escape_html(content)
        logger.debug("Skipping node of unknown type %s", type(node).__name__)
        return ""
