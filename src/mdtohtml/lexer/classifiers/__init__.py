"""Block-level line classifiers for the mdtohtml lexer.

Each classifier is a mixin that provides classification logic for
a specific block type. Classifiers are pure functions of the line text;
only the fence scanner moves the lexer position.
"""

from mdtohtml.lexer.classifiers.fence import (
    FenceClassifierMixin,
)
from mdtohtml.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from mdtohtml.lexer.classifiers.list import (
    ListClassifierMixin,
)
from mdtohtml.lexer.classifiers.quote import (
    QuoteClassifierMixin,
)
from mdtohtml.lexer.classifiers.table import (
    TableClassifierMixin,
)
from mdtohtml.lexer.classifiers.thematic import (
    ThematicClassifierMixin,
)

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "TableClassifierMixin",
    "ThematicClassifierMixin",
]
