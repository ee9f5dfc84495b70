"""Forward-only cursor over the lines of a document.

The line sequence is split once and never mutated; parsing only moves an
integer position forward.

Thread Safety:
Cursor instances are per-parse state. Create one per parse operation.

"""

from __future__ import annotations

from collections.abc import Callable


class LineCursor:
    """Forward-only position within an immutable tuple of lines.

    Usage:
        >>> cursor = LineCursor("a\\nb")
        >>> cursor.current
        'a'
        >>> cursor.advance()
        >>> cursor.current
        'b'

    """

    __slots__ = ("_lines", "_pos")

    def __init__(self, source: str) -> None:
        self._lines: tuple[str, ...] = tuple(source.split("\n"))
        self._pos = 0

    @property
    def pos(self) -> int:
        """Zero-based index of the current line."""
        return self._pos

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    @property
    def current(self) -> str:
        """Current line. Only valid while not at_end."""
        return self._lines[self._pos]

    def peek(self, offset: int = 1) -> str | None:
        """Return the line ``offset`` lines ahead, or None past the end."""
        index = self._pos + offset
        if index < len(self._lines):
            return self._lines[index]
        return None

    def advance(self, count: int = 1) -> None:
        self._pos = min(self._pos + count, len(self._lines))

    def take_while(self, predicate: Callable[[str], bool]) -> list[str]:
        """Consume and return consecutive lines matching predicate."""
        taken: list[str] = []
        while not self.at_end and predicate(self.current):
            taken.append(self.current)
            self._pos += 1
        return taken

    def take_until(self, predicate: Callable[[str], bool]) -> tuple[list[str], bool]:
        """Consume lines up to and including the first one matching predicate.

        Returns:
            The lines before the match, and whether a match was found.
            Without a match every remaining line is consumed.
        """
        taken: list[str] = []
        while not self.at_end:
            line = self.current
            self._pos += 1
            if predicate(line):
                return taken, True
            taken.append(line)
        return taken, False
