"""Line-oriented lexer for the mdtohtml Markdown converter.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize
├── core.py              # Lexer class (mixin composition + navigation)
├── classifiers/         # Line classification mixins
│   ├── heading.py       # ATX heading
│   ├── fence.py         # Fenced code start/end
│   ├── list.py          # Bullet and ordered list markers
│   ├── quote.py         # Block quote
│   ├── thematic.py      # Thematic break
│   └── table.py         # Pipe table rows
└── scanners/            # Position-moving scanners
    ├── block.py         # Per-line dispatch in priority order
    └── fence.py         # Multi-line fenced code consumption

Usage:
    >>> from mdtohtml.lexer import Lexer
    >>> lexer = Lexer("# Hello\n\nWorld")
    >>> for token in lexer.tokenize():
    ...     print(token)
Token(ATX_HEADING, 'Hello', 0)
Token(BLANK_LINE, '', 1)
Token(PARAGRAPH_LINE, 'World', 2)

"""

from mdtohtml.lexer.core import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
