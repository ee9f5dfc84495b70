"""Line-oriented block parser producing typed nodes.

Walks the source one line at a time with a forward-only cursor and emits
immutable (frozen) dataclass nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `BlockParsingMixin`: headings, quotes, lists, rules, paragraphs, code fences
- `TableParsingMixin`: pipe tables

Thread Safety:
- Parser produces immutable nodes (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share results across threads

"""

from __future__ import annotations

from clawmark.config import ParseConfig, get_parse_config
from clawmark.location import SourceLocation
from clawmark.nodes import Block
from clawmark.parsing.blocks import (
    BlockParsingMixin,
    heading_level,
    is_blank,
    is_blockquote,
    is_fence,
    is_horizontal_rule,
    is_ordered_item,
    is_unordered_item,
)
from clawmark.parsing.cursor import LineCursor
from clawmark.parsing.table import TableParsingMixin
from clawmark.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(BlockParsingMixin, TableParsingMixin):
    """Block parser for the documentation dialect.

    Usage:
        >>> parser = Parser("## Title\\n\\nSome **bold** text.")
        >>> parser.parse()
        (Heading(..., level=2, text='Title'), Paragraph(..., text='Some **bold** text.'))

    Rules are tried in a fixed order for every line and the first match
    consumes its whole run before scanning resumes. Parsing never fails:
    anything unrecognized becomes a paragraph.

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).

    """

    __slots__ = ("_source", "_source_file", "_cursor", "_config")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar when the parser is created.
        Use set_parse_config() or parse_config_context() beforehand for
        non-default configuration.

        Args:
            source: Document source text
            source_file: Optional source file path recorded in locations

        """
        self._source = source
        self._source_file = source_file
        self._cursor = LineCursor(source)
        self._config: ParseConfig = get_parse_config()

    def parse(self) -> tuple[Block, ...]:
        """Parse the whole source into blocks, in source order."""
        cursor = self._cursor
        blocks: list[Block] = []

        while not cursor.at_end:
            block = self._parse_block()
            if block is not None:
                blocks.append(block)

        logger.debug(
            "Parsed %d blocks from %d lines%s",
            len(blocks),
            cursor.line_count,
            f" ({self._source_file})" if self._source_file else "",
        )
        return tuple(blocks)

    def _parse_block(self) -> Block | None:
        """Apply the first matching rule at the cursor.

        Returns None (after skipping the line) for blank lines.
        """
        line = self._cursor.current

        if is_fence(line):
            return self._parse_fenced_code()

        level = heading_level(line)
        if level is not None:
            return self._parse_heading(level)

        if is_blockquote(line):
            return self._parse_blockquote()

        if self._config.tables_enabled and self._at_table_start():
            return self._parse_table()

        if is_unordered_item(line):
            return self._parse_unordered_list()

        if is_ordered_item(line):
            return self._parse_ordered_list()

        if is_horizontal_rule(line):
            return self._parse_horizontal_rule()

        if is_blank(line):
            self._cursor.advance()
            return None

        return self._parse_paragraph()

    # =========================================================================
    # Host methods for the parsing mixins
    # =========================================================================

    def _transform(self, text: str) -> str:
        """Apply the configured text transformer to raw inline text."""
        transformer = self._config.text_transformer
        if transformer is None:
            return text
        return transformer(text)

    def _location(self, start: int, end: int) -> SourceLocation:
        """Location for zero-based line indexes ``start`` through ``end``."""
        return SourceLocation(
            lineno=start + 1,
            end_lineno=end + 1,
            source_file=self._source_file,
        )
