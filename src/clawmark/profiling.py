"""Opt-in parse metrics for clawmark.

``profiled_parse()`` installs a ParseAccumulator in a ContextVar for the
duration of a ``with`` block. ``parse()`` and the fence rule report into it:
which block kinds a batch of pages produced, how many source lines were
scanned, and how many code fences were left open.

When no accumulator is installed get_parse_accumulator() returns None and
nothing is recorded.

Example:
    from clawmark import parse
    from clawmark.profiling import profiled_parse

    with profiled_parse() as metrics:
        for page in pages:
            parse(page)

    metrics.summary()
    # {"total_ms": 3.1, "parse_calls": 12, "source_lines": 480,
    #  "block_count": 201, "blocks_by_kind": {"Paragraph": 120, ...},
    #  "unterminated_fences": 1}

"""

from collections import Counter
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from clawmark.location import SourceLocation


@dataclass
class ParseAccumulator:
    """Metrics gathered across the parse calls of one profiled block.

    Attributes:
        start_time: perf_counter() value when profiling started.
        parse_calls: Documents parsed (cache hits are not counted).
        source_length: Total characters parsed.
        source_lines: Total lines scanned.
        blocks_by_kind: Block count per node class name.
        unterminated_fences: Locations of code fences closed by end of input.

    """

    start_time: float = field(default_factory=perf_counter)
    parse_calls: int = 0
    source_length: int = 0
    source_lines: int = 0
    blocks_by_kind: Counter[str] = field(default_factory=Counter)
    unterminated_fences: list[SourceLocation] = field(default_factory=list)

    def record_parse(self, source: str, blocks: Iterable[object]) -> None:
        """Record one parsed document."""
        self.parse_calls += 1
        self.source_length += len(source)
        self.source_lines += source.count("\n") + 1
        self.blocks_by_kind.update(type(block).__name__ for block in blocks)

    def record_unterminated_fence(self, location: SourceLocation) -> None:
        self.unterminated_fences.append(location)

    @property
    def block_count(self) -> int:
        return self.blocks_by_kind.total()

    @property
    def total_duration_ms(self) -> float:
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Plain-dict view, suitable for logging or JSON."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "parse_calls": self.parse_calls,
            "source_length": self.source_length,
            "source_lines": self.source_lines,
            "block_count": self.block_count,
            "blocks_by_kind": dict(sorted(self.blocks_by_kind.items())),
            "unterminated_fences": len(self.unterminated_fences),
        }


_accumulator: ContextVar[ParseAccumulator | None] = ContextVar(
    "parse_accumulator",
    default=None,
)


def get_parse_accumulator() -> ParseAccumulator | None:
    """Active accumulator, or None when profiling is off."""
    return _accumulator.get()


@contextmanager
def profiled_parse() -> Iterator[ParseAccumulator]:
    """Collect parse metrics for the duration of the with block."""
    acc = ParseAccumulator()
    token: Token[ParseAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
