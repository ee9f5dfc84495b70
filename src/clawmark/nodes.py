"""Typed document nodes for clawmark.

All nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base, carries a SourceLocation)
├── Document
├── Heading
├── Paragraph
├── CodeBlock
├── Blockquote
├── Table
├── UnorderedList
├── OrderedList
└── HorizontalRule

Span (inline content, positional, no location)
├── Text
├── Bold
├── Code
└── Link

Text-bearing blocks keep their raw inline text. Spans are produced on
demand by ``spans()``, which runs the inline formatter over that text.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Literal, overload

from clawmark.location import SourceLocation

# =============================================================================
# Spans
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Plain text, reproduced verbatim."""

    content: str


@dataclass(frozen=True, slots=True)
class Bold:
    """Bold text.

    Markup: **text**

    """

    content: str


@dataclass(frozen=True, slots=True)
class Code:
    """Inline code.

    Markup: `code`

    """

    content: str


@dataclass(frozen=True, slots=True)
class Link:
    """Hyperlink.

    Markup: [label](href)

    """

    label: str
    href: str


type Span = Text | Bold | Code | Link


def _format(text: str) -> tuple[Span, ...]:
    from clawmark.parsing.inline import format_inline

    return format_inline(text)


# =============================================================================
# Blocks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all block nodes.

    All blocks track the line range they were parsed from.

    """

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """Section heading.

    Markup: ## Heading or ### Heading
    Deeper levels are not recognized.

    """

    level: Literal[2, 3]
    text: str

    def spans(self) -> tuple[Span, ...]:
        return _format(self.text)


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """A single line of body text.

    Consecutive lines are separate paragraphs; nothing is reflowed.

    """

    text: str

    def spans(self) -> tuple[Span, ...]:
        return _format(self.text)


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    ``code`` holds the lines between the fences exactly as written, joined
    with newlines. ``info`` is whatever followed the opening fence
    (usually a language name), or None.

    """

    code: str
    info: str | None = None

    @property
    def language(self) -> str | None:
        """First word of the info string."""
        if not self.info:
            return None
        return self.info.split()[0]

    def copy_to(self, handler: Callable[[str], object]) -> None:
        """Hand the literal code to a copy action (e.g. a clipboard writer)."""
        handler(self.code)


@dataclass(frozen=True, slots=True)
class Blockquote(Node):
    """Quoted line.

    Markup: > quoted text
    One node per source line.

    """

    text: str

    def spans(self) -> tuple[Span, ...]:
        return _format(self.text)


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Pipe table.

    Markup:
        | A | B |
        |---|---|
        | 1 | 2 |

    Rows keep exactly the cells found on their line; they are neither
    padded nor truncated to the header width.

    """

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    def header_spans(self) -> tuple[tuple[Span, ...], ...]:
        return tuple(_format(cell) for cell in self.headers)

    def row_spans(self) -> tuple[tuple[tuple[Span, ...], ...], ...]:
        return tuple(tuple(_format(cell) for cell in row) for row in self.rows)


@dataclass(frozen=True, slots=True)
class UnorderedList(Node):
    """Bulleted list.

    Markup: - item or * item

    """

    items: tuple[str, ...]

    def item_spans(self) -> tuple[tuple[Span, ...], ...]:
        return tuple(_format(item) for item in self.items)


@dataclass(frozen=True, slots=True)
class OrderedList(Node):
    """Numbered list.

    Markup: 1. item
    Source digits are discarded; renderers number items 1..N.

    """

    items: tuple[str, ...]

    def item_spans(self) -> tuple[tuple[Span, ...], ...]:
        return tuple(_format(item) for item in self.items)


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Horizontal rule.

    Markup: --- (three or more dashes, nothing else)

    """


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node holding the parsed blocks in source order.

    Behaves as a read-only sequence of its children.

    """

    children: tuple[Block, ...]

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.children)

    @overload
    def __getitem__(self, index: int) -> Block: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Block, ...]: ...

    def __getitem__(self, index: int | slice) -> Block | tuple[Block, ...]:
        return self.children[index]


type Block = (
    Heading
    | Paragraph
    | CodeBlock
    | Blockquote
    | Table
    | UnorderedList
    | OrderedList
    | HorizontalRule
)
