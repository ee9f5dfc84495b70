"""Block-level rules for clawmark parser.

Line classifiers are plain functions over a single line. The mixin turns a
matching line (or run of lines) at the cursor into a block node.

Rule order, first match wins:
    1. fenced code      ```info ... ```
    2. heading          "## " or "### "
    3. blockquote       "> "
    4. table            pipe line followed by a "---" line
    5. unordered list   run of "- " / "* " lines
    6. ordered list     run of "1. " lines
    7. horizontal rule  "---" (dashes only)
    8. blank line       skipped
    9. paragraph        anything else, one per line

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clawmark.nodes import (
    Blockquote,
    CodeBlock,
    Heading,
    HorizontalRule,
    OrderedList,
    Paragraph,
    UnorderedList,
)
from clawmark.profiling import get_parse_accumulator
from clawmark.utils.logger import get_logger

if TYPE_CHECKING:
    from clawmark.location import SourceLocation
    from clawmark.parsing.cursor import LineCursor

logger = get_logger(__name__)

FENCE = "```"

_HEADING_PREFIXES: tuple[tuple[str, int], ...] = (("## ", 2), ("### ", 3))
_DIGITS = frozenset("0123456789")

# =============================================================================
# Line classifiers
# =============================================================================


def is_fence(line: str) -> bool:
    return line.strip().startswith(FENCE)


def heading_level(line: str) -> int | None:
    """Return 2 or 3 for a recognized heading line, else None.

    The space after the hashes is required; ``##Title`` is not a heading.
    """
    for prefix, level in _HEADING_PREFIXES:
        if line.startswith(prefix):
            return level
    return None


def is_blockquote(line: str) -> bool:
    return line.startswith("> ")


def is_unordered_item(line: str) -> bool:
    """``^[-*] ``"""
    return len(line) >= 2 and line[0] in "-*" and line[1] == " "


def ordered_prefix_length(line: str) -> int:
    """Length of a ``^\\d+\\.\\s`` prefix, or 0 if the line has none."""
    pos = 0
    while pos < len(line) and line[pos] in _DIGITS:
        pos += 1
    if pos == 0 or pos + 1 >= len(line) or line[pos] != ".":
        return 0
    if not line[pos + 1].isspace():
        return 0
    return pos + 2


def is_ordered_item(line: str) -> bool:
    return ordered_prefix_length(line) > 0


def is_horizontal_rule(line: str) -> bool:
    """``^-{3,}$``"""
    return len(line) >= 3 and line.count("-") == len(line)


def is_blank(line: str) -> bool:
    return not line.strip()


# =============================================================================
# Block parsing
# =============================================================================


class BlockParsingMixin:
    """Mixin turning lines at the cursor into block nodes.

    Each ``_parse_*`` method is called with the cursor on the line that
    matched its classifier and leaves the cursor on the first line it did
    not consume.

    Required Host Attributes:
        - _cursor: LineCursor

    Required Host Methods:
        - _transform(text) -> str
        - _location(start, end) -> SourceLocation

    """

    _cursor: LineCursor

    def _transform(self, text: str) -> str:
        raise NotImplementedError

    def _location(self, start: int, end: int) -> SourceLocation:
        raise NotImplementedError

    def _parse_fenced_code(self) -> CodeBlock:
        """Capture lines verbatim up to the closing fence.

        An unterminated fence runs to the end of the document.
        """
        start = self._cursor.pos
        info = self._cursor.current.strip()[len(FENCE):].strip() or None
        self._cursor.advance()

        lines, closed = self._cursor.take_until(is_fence)
        location = self._location(start, self._cursor.pos - 1)
        if not closed:
            logger.debug("Unterminated code fence at %s closed at end of input", location)
            acc = get_parse_accumulator()
            if acc is not None:
                acc.record_unterminated_fence(location)

        return CodeBlock(location=location, code="\n".join(lines), info=info)

    def _parse_heading(self, level: int) -> Heading:
        start = self._cursor.pos
        # "## " is 3 characters, "### " is 4
        text = self._cursor.current[level + 1 :]
        self._cursor.advance()
        return Heading(
            location=self._location(start, start),
            level=level,  # type: ignore[arg-type]
            text=self._transform(text),
        )

    def _parse_blockquote(self) -> Blockquote:
        start = self._cursor.pos
        text = self._cursor.current[2:]
        self._cursor.advance()
        return Blockquote(location=self._location(start, start), text=self._transform(text))

    def _parse_unordered_list(self) -> UnorderedList:
        start = self._cursor.pos
        lines = self._cursor.take_while(is_unordered_item)
        return UnorderedList(
            location=self._location(start, self._cursor.pos - 1),
            items=tuple(self._transform(line[2:]) for line in lines),
        )

    def _parse_ordered_list(self) -> OrderedList:
        start = self._cursor.pos
        lines = self._cursor.take_while(is_ordered_item)
        return OrderedList(
            location=self._location(start, self._cursor.pos - 1),
            items=tuple(self._transform(line[ordered_prefix_length(line) :]) for line in lines),
        )

    def _parse_horizontal_rule(self) -> HorizontalRule:
        start = self._cursor.pos
        self._cursor.advance()
        return HorizontalRule(location=self._location(start, start))

    def _parse_paragraph(self) -> Paragraph:
        start = self._cursor.pos
        text = self._cursor.current
        self._cursor.advance()
        return Paragraph(location=self._location(start, start), text=self._transform(text))
