"""CLI interface for mdtohtml.

Command-line tool for converting Markdown files to standalone HTML pages.
"""

import sys
from pathlib import Path

import click

from mdtohtml import __version__
from mdtohtml.config import THEMES, RenderConfig
from mdtohtml.converter import (
    convert_file,
    convert_files,
    find_markdown_files,
    is_markdown_file,
    output_path_for,
)
from mdtohtml.errors import ConversionError
from mdtohtml.utils.logger import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="mdtohtml")
def cli() -> None:
    """mdtohtml - Markdown to standalone HTML pages."""


@cli.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(path_type=Path))
@click.argument("output_path", metavar="[OUTPUT]", required=False, type=click.Path(path_type=Path))
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory for generated pages (default: next to each input)",
)
@click.option(
    "--theme",
    "-t",
    type=click.Choice(THEMES),
    default="light",
    show_default=True,
    help="Page color theme",
)
@click.option(
    "--highlight/--no-highlight",
    default=True,
    help="Enable/disable syntax highlighting of fenced code (default: enabled)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def convert(
    input_path: Path,
    output_path: Path | None,
    output_dir: Path | None,
    theme: str,
    highlight: bool,
    verbose: bool,
) -> None:
    """Convert a Markdown file, or every Markdown file in a directory."""
    configure_logging(verbose)
    config = RenderConfig(highlight=highlight, theme=theme)

    if not input_path.exists():
        click.echo(click.style(f"Error: {input_path} does not exist", fg="red"), err=True)
        sys.exit(1)

    if input_path.is_dir():
        if output_path is not None:
            raise click.UsageError("OUTPUT cannot be used with a directory; use --output-dir")
        _convert_directory(input_path, output_dir, config)
        return

    if not is_markdown_file(input_path):
        click.echo(
            click.style(f"Error: {input_path} is not a Markdown file", fg="red"),
            err=True,
        )
        sys.exit(1)

    target = output_path if output_path is not None else output_path_for(input_path, output_dir)
    try:
        written = convert_file(input_path, target, config)
    except ConversionError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"Converted {input_path} -> {written}")


def _convert_directory(directory: Path, output_dir: Path | None, config: RenderConfig) -> None:
    """Convert the Markdown files directly inside directory; exit 1 on any failure."""
    files = find_markdown_files(directory)
    if not files:
        click.echo(
            click.style(f"Error: no Markdown files found in {directory}", fg="red"),
            err=True,
        )
        sys.exit(1)

    click.echo(f"Converting {len(files)} file(s) from {directory}...")
    results = convert_files(files, output_dir, config)

    failed = 0
    for result in results:
        if result.success:
            click.echo(f"  {result.input_path} -> {result.output_path}")
        else:
            failed += 1
            click.echo(click.style(f"  {result.input_path}: {result.error}", fg="red"), err=True)

    converted = len(results) - failed
    if failed:
        click.echo(
            click.style(f"Converted {converted} of {len(results)} file(s)", fg="yellow"),
            err=True,
        )
        sys.exit(1)

    click.echo(click.style(f"Converted {converted} file(s)", fg="green"))


if __name__ == "__main__":
    cli()
