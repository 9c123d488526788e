"""File conversion helpers.

Reads Markdown files, converts them with mdtohtml.convert, and writes the
resulting pages next to the input or into an output directory.

Usage:
    >>> from mdtohtml.converter import convert_file, convert_files
    >>> convert_file("README.md")
    PosixPath('README.html')
    >>> results = convert_files(["a.md", "b.md"], output_dir="site")
    >>> [r.success for r in results]
    [True, True]

A single file either converts completely or nothing is written for it.
Batch conversion records failures per file and never raises.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mdtohtml import convert
from mdtohtml.config import RenderConfig
from mdtohtml.errors import ConversionError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
    {".md", ".markdown", ".mdown", ".mkdn", ".mkd", ".mdwn", ".mdtxt", ".mdtext"}
)

OUTPUT_SUFFIX = ".html"


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of converting one file.

    Attributes:
        input_path: Markdown file that was converted
        output_path: HTML file written, or the intended target on failure
        success: Whether the page was written
        error: Failure description when success is False
    """

    input_path: Path
    output_path: Path | None
    success: bool
    error: str | None = None


def is_markdown_file(path: str | Path) -> bool:
    """Check the file extension against SUPPORTED_EXTENSIONS (case-insensitive)."""
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS


def output_path_for(input_path: str | Path, output_dir: str | Path | None = None) -> Path:
    """Return the HTML path for a Markdown file.

    The stem is kept and the suffix replaced with ``.html``. Without
    output_dir the page goes next to the input.
    """
    source = Path(input_path)
    target_name = source.with_suffix(OUTPUT_SUFFIX).name
    if output_dir is None:
        return source.with_name(target_name)
    return Path(output_dir) / target_name


def validate_file(path: str | Path) -> bool:
    """Check that path is an existing, readable Markdown file."""
    candidate = Path(path)
    return (
        candidate.is_file()
        and is_markdown_file(candidate)
        and os.access(candidate, os.R_OK)
    )


def convert_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    options: RenderConfig | Mapping[str, Any] | None = None,
) -> Path:
    """Convert one Markdown file to a standalone HTML page.

    Args:
        input_path: Markdown file, read as UTF-8
        output_path: Target file; defaults to output_path_for(input_path)
        options: Render options passed to mdtohtml.convert

    Returns:
        Path of the written page

    Raises:
        ConversionError: If the input cannot be read or the output cannot
            be written
    """
    source = Path(input_path)
    target = Path(output_path) if output_path is not None else output_path_for(source)

    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConversionError(source, f"cannot read input: {e}") from e

    html = convert(text, options)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
    except OSError as e:
        raise ConversionError(target, f"cannot write output: {e}") from e

    logger.info("Converted %s -> %s", source, target)
    return target


def convert_files(
    paths: Iterable[str | Path],
    output_dir: str | Path | None = None,
    options: RenderConfig | Mapping[str, Any] | None = None,
) -> list[ConversionResult]:
    """Convert several Markdown files, one after another.

    Args:
        paths: Markdown files to convert
        output_dir: Directory for all pages; defaults to next to each input
        options: Render options passed to mdtohtml.convert

    Returns:
        One ConversionResult per input, in input order
    """
    results: list[ConversionResult] = []
    for path in paths:
        source = Path(path)
        target = output_path_for(source, output_dir)

        if not is_markdown_file(source):
            error = f"not a Markdown file (expected one of {', '.join(sorted(SUPPORTED_EXTENSIONS))})"
            logger.warning("Skipping %s: %s", source, error)
            results.append(ConversionResult(source, None, success=False, error=error))
            continue

        try:
            written = convert_file(source, target, options)
        except ConversionError as e:
            logger.warning("Failed to convert %s: %s", source, e)
            results.append(ConversionResult(source, target, success=False, error=str(e)))
            continue

        results.append(ConversionResult(source, written, success=True))

    return results


def find_markdown_files(directory: str | Path) -> list[Path]:
    """List the Markdown files directly inside directory, sorted by name."""
    return sorted(
        entry for entry in Path(directory).iterdir() if entry.is_file() and is_markdown_file(entry)
    )


__all__ = [
    "SUPPORTED_EXTENSIONS",
    "ConversionResult",
    "convert_file",
    "convert_files",
    "find_markdown_files",
    "is_markdown_file",
    "output_path_for",
    "validate_file",
]
