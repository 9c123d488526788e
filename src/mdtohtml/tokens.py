"""Token and TokenType definitions for the mdtohtml lexer.

The lexer produces one Token per physical line, except for fenced code,
which is a single token spanning the whole fence.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Line-level token types produced by the lexer."""

    BLANK_LINE = auto()

    ATX_HEADING = auto()  # # Heading
    FENCED_CODE = auto()  # ```lang ... ```

    LIST_ITEM = auto()  # - item, * item, + item
    ORDERED_LIST_ITEM = auto()  # 1. item
    BLOCK_QUOTE = auto()  # > quote

    THEMATIC_BREAK = auto()  # ---, ***, ___
    TABLE_ROW = auto()  # | cell | cell |

    PARAGRAPH_LINE = auto()  # Anything else


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Line content with block markers stripped. For FENCED_CODE
            this is the code between the fences, verbatim.
        level: Heading level 1-6 (ATX_HEADING only)
        language: Info string after the opening fence (FENCED_CODE only)
        cells: Trimmed cell texts (TABLE_ROW only)
        lineno: Index of the first source line (0-indexed)
        line_count: Number of source lines this token consumed

    """

    type: TokenType
    value: str
    level: int = 0
    language: str = ""
    cells: tuple[str, ...] = ()
    lineno: int = 0
    line_count: int = 1

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno})"
