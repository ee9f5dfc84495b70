"""Source location tracking for blocks.

Provides SourceLocation dataclass for tracking the line range a block was
parsed from. Used by AST nodes, renderers and debugging output.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Line range of a block in its source document.

    Both line numbers are 1-indexed and inclusive. Fenced code blocks
    include their fence lines in the range.

    Attributes:
        lineno: First line of the block
        end_lineno: Last line of the block
        source_file: Source file path (optional)

    Examples:
        >>> loc = SourceLocation(lineno=3, end_lineno=5)
        >>> str(loc)
        '3-5'

        >>> str(SourceLocation(2, 2, "docs/setup.md"))
        'docs/setup.md:2'

    """

    lineno: int
    end_lineno: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for log and error messages."""
        lines = str(self.lineno)
        if self.end_lineno != self.lineno:
            lines = f"{self.lineno}-{self.end_lineno}"
        if self.source_file:
            return f"{self.source_file}:{lines}"
        return lines

    @property
    def line_count(self) -> int:
        """Number of source lines covered."""
        return self.end_lineno - self.lineno + 1

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end."""
        return SourceLocation(
            lineno=self.lineno,
            end_lineno=end.end_lineno,
            source_file=self.source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create a placeholder location for synthetic nodes."""
        return cls(lineno=0, end_lineno=0)
