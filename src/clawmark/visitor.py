"""Visitor and transformer for clawmark documents.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen documents.

Example, collecting all links:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.hrefs: list[str] = []

        def visit_link(self, node: Link) -> None:
            self.hrefs.append(node.href)

    collector = LinkCollector()
    collector.visit(doc)

Example, dropping horizontal rules:

    new_doc = transform(doc, lambda b: None if isinstance(b, HorizontalRule) else b)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure and safe to call from any thread.

"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

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
    Node,
    OrderedList,
    Paragraph,
    Span,
    Table,
    Text,
    UnorderedList,
)


class BaseVisitor[T]:
    """Base visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call; for text-bearing
    blocks the children are the spans produced by the inline formatter.

    """

    def visit(self, node: Node | Span) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node | Span) -> T:
        """Called for node types without a specific ``visit_*`` override."""
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_code_block(self, node: CodeBlock) -> T:
        return self.visit_default(node)

    def visit_blockquote(self, node: Blockquote) -> T:
        return self.visit_default(node)

    def visit_table(self, node: Table) -> T:
        return self.visit_default(node)

    def visit_unordered_list(self, node: UnorderedList) -> T:
        return self.visit_default(node)

    def visit_ordered_list(self, node: OrderedList) -> T:
        return self.visit_default(node)

    def visit_horizontal_rule(self, node: HorizontalRule) -> T:
        return self.visit_default(node)

    # -- Span visitors ---------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_bold(self, node: Bold) -> T:
        return self.visit_default(node)

    def visit_code(self, node: Code) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node | Span) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case Heading():
                return self.visit_heading(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case CodeBlock():
                return self.visit_code_block(node)
            case Blockquote():
                return self.visit_blockquote(node)
            case Table():
                return self.visit_table(node)
            case UnorderedList():
                return self.visit_unordered_list(node)
            case OrderedList():
                return self.visit_ordered_list(node)
            case HorizontalRule():
                return self.visit_horizontal_rule(node)
            case Text():
                return self.visit_text(node)
            case Bold():
                return self.visit_bold(node)
            case Code():
                return self.visit_code(node)
            case Link():
                return self.visit_link(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node | Span) -> None:
        match node:
            case Document(children=children):
                for child in children:
                    self.visit(child)
            case Heading() | Paragraph() | Blockquote():
                for span in node.spans():
                    self.visit(span)
            case UnorderedList() | OrderedList():
                for spans in node.item_spans():
                    for span in spans:
                        self.visit(span)
            case Table():
                for spans in node.header_spans():
                    for span in spans:
                        self.visit(span)
                for row in node.row_spans():
                    for spans in row:
                        for span in spans:
                            self.visit(span)
            case _:
                pass  # Code blocks, rules and spans have no children


def transform(doc: Document, fn: Callable[[Block], Block | None]) -> Document:
    """Apply a function to every block, returning a new document.

    Return ``None`` from ``fn`` to remove a block. Since all nodes are
    frozen dataclasses, this produces a new immutable tree; the original is
    untouched. When nothing changes the original document is returned.

    """
    new_children = tuple(
        result for block in doc.children
        if (result := fn(block)) is not None
    )
    if new_children == doc.children:
        return doc
    return dataclasses.replace(doc, children=new_children)
