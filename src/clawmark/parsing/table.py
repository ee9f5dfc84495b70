"""Table parsing for clawmark parser.

Handles pipe tables:

    | Header 1 | Header 2 |   <- header row
    |----------|----------|   <- separator row (any line containing "---")
    | Cell 1   | Cell 2   |   <- body rows

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clawmark.nodes import Table

if TYPE_CHECKING:
    from clawmark.location import SourceLocation
    from clawmark.parsing.cursor import LineCursor


def split_table_row(line: str) -> tuple[str, ...]:
    """Split a table line into trimmed, non-empty cells.

    Empty segments (from leading/trailing pipes or ``||``) are dropped, so
    the cell count can differ from row to row.

    Example:
        >>> split_table_row("| A |  | B |")
        ('A', 'B')
    """
    return tuple(cell for cell in (part.strip() for part in line.split("|")) if cell)


def is_table_line(line: str) -> bool:
    return "|" in line


class TableParsingMixin:
    """Mixin for pipe table parsing.

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

    def _at_table_start(self) -> bool:
        """A line with a pipe followed by a line containing ``---``."""
        following = self._cursor.peek()
        return is_table_line(self._cursor.current) and following is not None and "---" in following

    def _parse_table(self) -> Table:
        """Consume the run of pipe lines starting at the cursor.

        The first line gives the headers and the second line is dropped as
        the separator. Every further line becomes a row as-is.
        """
        start = self._cursor.pos
        lines = self._cursor.take_while(is_table_line)

        headers = tuple(self._transform(cell) for cell in split_table_row(lines[0]))
        rows = tuple(
            tuple(self._transform(cell) for cell in split_table_row(line))
            for line in lines[2:]
        )
        return Table(
            location=self._location(start, self._cursor.pos - 1),
            headers=headers,
            rows=rows,
        )
