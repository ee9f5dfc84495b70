"""clawmark renderers.

Renderers convert parsed documents into output formats.

Available Renderers:
- HtmlRenderer: Renders documents to HTML using StringBuilder pattern
- TextRenderer: Renders documents to structured plain text

Thread Safety:
All renderers use StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from clawmark.renderers.html import HeadingInfo, HtmlRenderer
from clawmark.renderers.protocol import ASTRenderer
from clawmark.renderers.text import TextRenderer

__all__ = ["ASTRenderer", "HeadingInfo", "HtmlRenderer", "TextRenderer"]
