"""Plain-text renderer producing structured text for terminals, search
indexes and model prompts.

No HTML. Inline markup is dropped, links keep their target in parentheses,
code blocks are labelled explicitly.

Example:
    >>> from clawmark import parse, render_text
    >>> render_text(parse("## Setup\\n\\n1. Install\\n2. Run"))
    '## Setup\\n\\n1. Install\\n2. Run\\n\\n'
"""

from collections.abc import Iterable

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
from clawmark.stringbuilder import StringBuilder


class TextRenderer:
    """Render documents to structured plain text."""

    __slots__ = ()

    def render(self, node: Document) -> str:
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb)
        return sb.build()

    def _render_block(self, block: Block, sb: StringBuilder) -> None:
        match block:
            case Heading():
                sb.append("#" * block.level + " ")
                self._render_spans(block.spans(), sb)
                sb.append("\n\n")
            case Paragraph():
                self._render_spans(block.spans(), sb)
                sb.append("\n\n")
            case CodeBlock():
                lang = block.language
                sb.append(f"[code:{lang}]" if lang else "[code]").append("\n")
                sb.append(block.code)
                sb.append("\n[/code]\n\n")
            case Blockquote():
                sb.append("> ")
                self._render_spans(block.spans(), sb)
                sb.append("\n\n")
            case UnorderedList():
                for spans in block.item_spans():
                    sb.append("- ")
                    self._render_spans(spans, sb)
                    sb.append("\n")
                sb.append("\n")
            case OrderedList():
                for number, spans in enumerate(block.item_spans(), start=1):
                    sb.append(f"{number}. ")
                    self._render_spans(spans, sb)
                    sb.append("\n")
                sb.append("\n")
            case Table():
                self._render_table(block, sb)
            case HorizontalRule():
                sb.append("---\n\n")
            case _:
                raise RenderError(block, renderer=type(self).__name__)

    def _render_table(self, table: Table, sb: StringBuilder) -> None:
        sb.append(" | ".join(self._cell_text(cell) for cell in table.header_spans()))
        sb.append("\n")
        for row in table.row_spans():
            sb.append(" | ".join(self._cell_text(cell) for cell in row))
            sb.append("\n")
        sb.append("\n")

    def _cell_text(self, spans: Iterable[Span]) -> str:
        sb = StringBuilder()
        self._render_spans(spans, sb)
        return sb.build()

    def _render_spans(self, spans: Iterable[Span], sb: StringBuilder) -> None:
        for span in spans:
            match span:
                case Text(content=content) | Bold(content=content) | Code(content=content):
                    sb.append(content)
                case Link(label=label, href=href):
                    sb.append(f"{label} ({href})")
                case _:
                    raise RenderError(span, renderer=type(self).__name__)
