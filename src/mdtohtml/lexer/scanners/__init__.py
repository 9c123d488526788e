"""Scanners for the mdtohtml lexer.

Each scanner is a mixin that consumes one or more source lines and
emits tokens; classifiers decide, scanners move the position.
"""

from __future__ import annotations

from mdtohtml.lexer.scanners.block import BlockScannerMixin
from mdtohtml.lexer.scanners.fence import FenceScannerMixin

__all__ = [
    "BlockScannerMixin",
    "FenceScannerMixin",
]
