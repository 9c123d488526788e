"""Typed AST nodes for mdtohtml.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── FencedCode
│   ├── BlockQuote
│   ├── List
│   ├── ListItem
│   ├── ThematicBreak
│   ├── Table
│   └── TableRow
└── Inline (inline elements)
    ├── Text
    ├── Emphasis
    ├── Strong
    ├── Link
    ├── Image
    └── CodeSpan

Inline-bearing blocks (Heading, Paragraph, BlockQuote, ListItem) keep the
flat source text in ``content`` next to the resolved ``children``. The
renderer uses ``content`` when ``children`` is empty.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content.

    The most common inline node, representing literal text.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Emphasized (italic) text.

    Markdown: *text*
    HTML: <em>text</em>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong (bold) text.

    Markdown: **text**
    HTML: <strong>text</strong>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](url)
    HTML: <a href="url">text</a>

    The label is not parsed for nested spans.

    """

    url: str
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    Markdown: ![alt](src)
    HTML: <img src="src" alt="alt" />

    """

    src: str
    alt: str


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code.

    Markdown: `code`
    HTML: <code>code</code>

    """

    code: str


Inline: TypeAlias = Text | Emphasis | Strong | Link | Image | CodeSpan


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading.

    Markdown: # Heading
    HTML: <h1>Heading</h1>

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    content: str
    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block, one per source line.

    Markdown: any unclassified line
    HTML: <p>text</p>

    """

    content: str
    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class FencedCode(Node):
    """Fenced code block.

    Markdown: ```lang ... ```
    HTML: <pre><code class="language-lang">code</code></pre>

    ``code`` is the raw text between the fences; it is escaped (or
    highlighted) only at render time.

    """

    code: str
    language: str = ""


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote, one per quoted source line.

    Markdown: > quoted text
    HTML: <blockquote>text</blockquote>

    """

    content: str
    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    Markdown: - item or 1. item
    HTML: <li>item</li>

    """

    content: str
    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    Markdown: - item or 1. item
    HTML: <ul>/<ol> with <li> children

    """

    items: tuple[ListItem, ...]
    ordered: bool = False


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Thematic break (horizontal rule).

    Markdown: --- or *** or ___
    HTML: <hr>

    """


@dataclass(frozen=True, slots=True)
class TableRow(Node):
    """Table row.

    Markdown: | cell1 | cell2 |
    HTML: <tr><td>cell1</td><td>cell2</td></tr>

    """

    cells: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Pipe table.

    Rows are stored in source order. The tree does not mark a header row;
    the renderer treats the first row as the header.

    """

    rows: tuple[TableRow, ...]


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Contains all top-level blocks in the document.

    """

    children: tuple[Block, ...]


Block: TypeAlias = (
    Document
    | Heading
    | Paragraph
    | FencedCode
    | BlockQuote
    | List
    | ListItem
    | ThematicBreak
    | Table
    | TableRow
)
