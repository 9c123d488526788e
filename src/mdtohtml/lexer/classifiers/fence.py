"""Fenced code classifier mixin."""

from __future__ import annotations

from mdtohtml.parsing.charsets import FENCE_MARKER


class FenceClassifierMixin:
    """Mixin providing fenced code start/end classification."""

    def _try_classify_fence_start(self, content: str) -> str | None:
        """Try to classify content as an opening fence.

        Args:
            content: Line content with surrounding whitespace stripped

        Returns:
            The language tag ("" when absent) if this opens a fence,
            None otherwise.
        """
        if not content.startswith(FENCE_MARKER):
            return None
        return content[len(FENCE_MARKER) :].strip()

    def _is_closing_fence(self, line: str) -> bool:
        """Check if a raw line closes the current fence.

        Anything after the backticks is ignored, so "```js" also closes.
        """
        return line.strip().startswith(FENCE_MARKER)
