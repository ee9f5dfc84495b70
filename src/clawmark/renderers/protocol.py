"""ASTRenderer protocol: stable interface for document renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.

Example:
    from clawmark.renderers.protocol import ASTRenderer

    def render_page(renderer: ASTRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from clawmark.nodes import Document


class ASTRenderer(Protocol):
    """Protocol for document renderers.

    The built-in ``HtmlRenderer`` and ``TextRenderer`` conform to it.

    """

    def render(self, node: Document) -> str:
        """Render a Document to a string."""
        ...
