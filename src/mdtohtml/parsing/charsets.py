"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from mdtohtml.parsing.charsets import THEMATIC_BREAK_CHARS

    if char in THEMATIC_BREAK_CHARS:  # O(1) lookup
        ...
"""

# Opening and closing fence marker
FENCE_MARKER = "```"

# List marker characters
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-*+")

# Block quote marker
BLOCK_QUOTE_MARKER = ">"

# Thematic break characters (may be mixed: "-*_" is a valid break)
THEMATIC_BREAK_CHARS: frozenset[str] = frozenset("-*_")

# Table cell delimiter
TABLE_DELIMITER = "|"

# Digits for ordered list detection
DIGITS: frozenset[str] = frozenset("0123456789")

# Inline special characters that may open a span
INLINE_SPECIAL: frozenset[str] = frozenset("*`[!")
