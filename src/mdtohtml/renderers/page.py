"""Standalone HTML page assembly.

Wraps a rendered body fragment in the document shell: doctype, head with
charset, viewport, title and stylesheet link, and a container div. The
theme is applied as a class on the root element.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mdtohtml.config import RenderConfig, coerce_options, render_config_context
from mdtohtml.nodes import Document
from mdtohtml.renderers.html import HtmlRenderer
from mdtohtml.utils.text import escape_html

_PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en" class="{theme_class}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <link rel="stylesheet" href="{stylesheet}">
</head>
<body>
    <div class="container">
        {content}
    </div>
</body>
</html>"""


def wrap_document(body: str, config: RenderConfig) -> str:
    """Wrap an HTML fragment in the page shell.

    Args:
        body: Rendered body fragment (inserted verbatim)
        config: Supplies theme, title and stylesheet

    Returns:
        Complete HTML document
    """
    return _PAGE_TEMPLATE.format(
        theme_class=config.theme_class,
        title=escape_html(config.title),
        stylesheet=escape_html(config.stylesheet),
        content=body,
    )


def serialize(
    doc: Document,
    options: RenderConfig | Mapping[str, Any] | None = None,
) -> str:
    """Render a Document to a complete HTML page.

    Args:
        doc: Document AST root
        options: RenderConfig or mapping of its fields; unknown keys and
            unrecognized themes are tolerated

    Returns:
        Complete HTML document
    """
    config = coerce_options(options)
    with render_config_context(config):
        body = HtmlRenderer().render(doc)
    return wrap_document(body, config)
