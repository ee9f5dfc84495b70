"""HTML renderer using StringBuilder pattern.

Renders parsed documents to HTML in a single pass.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.

Heading IDs are generated during the walk; TOC data is collected on the way.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from clawmark.errors import RenderError
from clawmark.nodes import (
    Block,
    Blockquote,
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Link,
    OrderedList,
    Paragraph,
    Span,
    Table,
    Text,
    UnorderedList,
)
from clawmark.parsing.inline import plain_text
from clawmark.stringbuilder import StringBuilder
from clawmark.utils.logger import get_logger
from clawmark.utils.text import escape_html
from clawmark.utils.text import slugify as default_slugify

logger = get_logger(__name__)

# Schemes that are never emitted as live links
_UNSAFE_SCHEMES = ("javascript:", "vbscript:", "data:")

# Browsers drop tab/CR/LF anywhere in a URL and trim C0 controls and spaces
_URL_IGNORED = re.compile(r"[\x00-\x20]")


def _safe_href(href: str) -> str:
    if _URL_IGNORED.sub("", href).lower().startswith(_UNSAFE_SCHEMES):
        logger.debug("Dropping unsafe link target %r", href)
        return "#"
    return href


@dataclass(frozen=True, slots=True)
class HeadingInfo:
    """Heading metadata collected during rendering, for building a TOC."""

    level: int
    text: str
    slug: str


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render, ensuring thread safety when sharing
    HtmlRenderer instances across threads.
    """

    headings: list[HeadingInfo] = field(default_factory=list)
    seen_slugs: set[str] = field(default_factory=set)


class HtmlRenderer:
    """Render documents to HTML.

    Usage:
        >>> from clawmark import parse
        >>> renderer = HtmlRenderer()
        >>> renderer.render(parse("## Hello **World**"))
        '<h2 id="hello-world">Hello <strong>World</strong></h2>\\n'

    Code blocks carry a ``data-copy`` attribute so a front end can wire its
    copy-to-clipboard button to the literal code.

    Thread Safety:
        Each render() call creates an independent RenderContext.
    """

    __slots__ = ("_text_transformer", "_slugify", "_link_attrs", "_last_context")

    def __init__(
        self,
        *,
        text_transformer: Callable[[str], str] | None = None,
        slugify: Callable[[str], str] | None = None,
        external_links: bool = False,
    ) -> None:
        """Initialize renderer.

        Args:
            text_transformer: Optional callback to transform plain text spans
            slugify: Optional custom slugify function for heading IDs
            external_links: Open links in a new tab, without opener or
                referrer
        """
        self._text_transformer = text_transformer
        self._slugify = slugify or default_slugify
        self._link_attrs = ' target="_blank" rel="noopener noreferrer"' if external_links else ""
        self._last_context: RenderContext | None = None

    def render(self, node: Document) -> str:
        """Render document to an HTML string."""
        ctx = RenderContext()
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb, ctx)
        self._last_context = ctx
        return sb.build()

    def get_headings(self) -> list[HeadingInfo]:
        """Heading info collected during the last render() call.

        Use the value immediately after render() in the same thread.
        """
        if self._last_context is None:
            return []
        return self._last_context.headings.copy()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder, ctx: RenderContext) -> None:
        match block:
            case Heading():
                self._render_heading(block, sb, ctx)
            case Paragraph():
                sb.append("<p>")
                self._render_spans(block.spans(), sb)
                sb.append("</p>\n")
            case CodeBlock():
                self._render_code_block(block, sb)
            case Blockquote():
                sb.append("<blockquote><p>")
                self._render_spans(block.spans(), sb)
                sb.append("</p></blockquote>\n")
            case Table():
                self._render_table(block, sb)
            case UnorderedList():
                self._render_list("ul", block.item_spans(), sb)
            case OrderedList():
                self._render_list("ol", block.item_spans(), sb)
            case HorizontalRule():
                sb.append("<hr />\n")
            case _:
                raise RenderError(block, renderer=type(self).__name__)

    def _render_heading(self, heading: Heading, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render heading with a unique ID for anchoring."""
        spans = heading.spans()
        text = plain_text(spans)

        slug = self._slugify(text)
        original_slug = slug
        counter = 1
        while slug in ctx.seen_slugs:
            slug = f"{original_slug}-{counter}"
            counter += 1
        ctx.seen_slugs.add(slug)

        ctx.headings.append(HeadingInfo(level=heading.level, text=text, slug=slug))

        sb.append(f'<h{heading.level} id="{escape_html(slug)}">')
        self._render_spans(spans, sb)
        sb.append(f"</h{heading.level}>\n")

    def _render_code_block(self, block: CodeBlock, sb: StringBuilder) -> None:
        lang = block.language
        lang_class = f' class="language-{escape_html(lang)}"' if lang else ""
        sb.append(f'<pre data-copy="{escape_html(block.code)}"><code{lang_class}>')
        sb.append(escape_html(block.code))
        sb.append("</code></pre>\n")

    def _render_table(self, table: Table, sb: StringBuilder) -> None:
        sb.append("<table>\n<thead>\n<tr>\n")
        for cell in table.header_spans():
            sb.append("<th>")
            self._render_spans(cell, sb)
            sb.append("</th>\n")
        sb.append("</tr>\n</thead>\n")

        if table.rows:
            sb.append("<tbody>\n")
            for row in table.row_spans():
                sb.append("<tr>\n")
                for cell in row:
                    sb.append("<td>")
                    self._render_spans(cell, sb)
                    sb.append("</td>\n")
                sb.append("</tr>\n")
            sb.append("</tbody>\n")

        sb.append("</table>\n")

    def _render_list(
        self, tag: str, items: Iterable[tuple[Span, ...]], sb: StringBuilder
    ) -> None:
        # <ol> numbers its items 1..N itself; source digits are gone by now
        sb.append(f"<{tag}>\n")
        for spans in items:
            sb.append("<li>")
            self._render_spans(spans, sb)
            sb.append("</li>\n")
        sb.append(f"</{tag}>\n")

    # =========================================================================
    # Span rendering
    # =========================================================================

    def _render_spans(self, spans: Iterable[Span], sb: StringBuilder) -> None:
        for span in spans:
            match span:
                case Text(content=content):
                    if self._text_transformer:
                        content = self._text_transformer(content)
                    sb.append(escape_html(content))
                case Bold(content=content):
                    sb.append("<strong>").append(escape_html(content)).append("</strong>")
                case Code(content=content):
                    sb.append("<code>").append(escape_html(content)).append("</code>")
                case Link(label=label, href=href):
                    sb.append(f'<a href="{escape_html(_safe_href(href))}"{self._link_attrs}>')
                    sb.append(escape_html(label))
                    sb.append("</a>")
                case _:
                    raise RenderError(span, renderer=type(self).__name__)
