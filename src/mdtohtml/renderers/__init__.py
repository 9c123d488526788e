"""mdtohtml renderers.

Renderers convert typed AST nodes into HTML.

Available:
- HtmlRenderer: Renders AST to an HTML body fragment
- wrap_document: Wraps a fragment in the standalone page shell
- serialize: Fragment plus page shell in one call

Thread Safety:
Renderers keep no per-render state on the instance.
Safe for concurrent use from multiple threads.

"""

from mdtohtml.renderers.html import HtmlRenderer
from mdtohtml.renderers.page import serialize, wrap_document

__all__ = ["HtmlRenderer", "serialize", "wrap_document"]
