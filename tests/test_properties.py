"""Property-based tests for parser and inline formatter invariants."""

from hypothesis import given, settings
from hypothesis import strategies as st

from clawmark import parse
from clawmark.nodes import CodeBlock, Document, OrderedList, Paragraph, Table, Text
from clawmark.parsing.inline import format_inline, to_markup

# Biased toward delimiter characters so matches actually happen
MARKUP_ALPHABET = "ab *`[]()-|#>.1 \t"
markup_text = st.text(alphabet=MARKUP_ALPHABET, max_size=80)
markup_source = st.text(alphabet=MARKUP_ALPHABET + "\n", max_size=200)

cell_text = st.text(alphabet="ab -*#`>1. ", max_size=8)
single_line = st.text(alphabet=st.characters(exclude_characters="\n"), max_size=30)


class TestInlineProperties:
    @given(markup_text)
    def test_deterministic(self, text: str) -> None:
        assert format_inline(text) == format_inline(text)

    @given(st.one_of(markup_text, st.text(max_size=80)))
    def test_markup_round_trip(self, text: str) -> None:
        """Nothing is lost or invented: delimiters re-inserted give the input."""
        assert to_markup(format_inline(text)) == text

    @given(markup_text)
    def test_no_empty_text_spans(self, text: str) -> None:
        for span in format_inline(text):
            if isinstance(span, Text):
                assert span.content

    @given(st.text(alphabet="ab .", max_size=40))
    def test_text_without_delimiters_is_one_span(self, text: str) -> None:
        expected = (Text(content=text),) if text else ()
        assert format_inline(text) == expected


class TestParserProperties:
    @settings(max_examples=200)
    @given(st.one_of(markup_source, st.text(max_size=200)))
    def test_parse_is_total(self, source: str) -> None:
        doc = parse(source)
        assert isinstance(doc, Document)
        for block in doc:
            assert 1 <= block.location.lineno <= block.location.end_lineno

    @given(markup_source)
    def test_deterministic(self, source: str) -> None:
        assert parse(source) == parse(source)

    @settings(max_examples=300)
    @given(st.one_of(markup_source, st.text(alphabet=MARKUP_ALPHABET + "\n`", max_size=200)))
    def test_blocks_cover_every_non_blank_line_in_order(self, source: str) -> None:
        """Blocks are disjoint, ordered, and together account for every non-blank line."""
        lines = source.split("\n")
        covered: set[int] = set()
        previous_end = 0
        for block in parse(source):
            loc = block.location
            assert loc.lineno > previous_end
            previous_end = loc.end_lineno
            covered.update(range(loc.lineno, loc.end_lineno + 1))
            if isinstance(block, Paragraph):
                assert block.text == lines[loc.lineno - 1]
        non_blank = {n for n, line in enumerate(lines, start=1) if line.strip()}
        assert non_blank <= covered
        assert max(covered, default=0) <= len(lines)

    @given(st.lists(single_line.filter(lambda line: not line.strip().startswith("```"))))
    def test_code_is_byte_exact(self, lines: list[str]) -> None:
        source = "```\n" + "\n".join(lines) + "\n```"
        (block,) = parse(source)
        assert isinstance(block, CodeBlock)
        assert block.code == "\n".join(lines)

    @given(
        st.lists(cell_text, min_size=1, max_size=5),
        st.lists(st.lists(cell_text, max_size=5), max_size=5),
    )
    def test_table_cell_counts(self, header: list[str], rows: list[list[str]]) -> None:
        """Each row keeps exactly its own non-empty cells."""

        def line(cells: list[str]) -> str:
            return "|" + "|".join(cells) + "|"

        source = "\n".join([line(header), "|---|", *(line(r) for r in rows)])
        (table,) = parse(source)
        assert isinstance(table, Table)
        assert len(table.headers) == sum(1 for c in header if c.strip())
        assert len(table.rows) == len(rows)
        for parsed, cells in zip(table.rows, rows, strict=True):
            assert len(parsed) == sum(1 for c in cells if c.strip())

    @given(st.lists(st.text(alphabet="abc xyz", min_size=1, max_size=12), min_size=1, max_size=8))
    def test_ordered_items_keep_order(self, items: list[str]) -> None:
        source = "\n".join(f"{n}. {item}" for n, item in enumerate(items, start=7))
        (block,) = parse(source)
        assert isinstance(block, OrderedList)
        assert block.items == tuple(items)

    @given(st.lists(st.text(alphabet="abc xyz.", min_size=1, max_size=20), max_size=8))
    def test_paragraph_lines_are_not_merged(self, lines: list[str]) -> None:
        source = "\n".join(lines)
        expected = [line for line in lines if line.strip()]
        doc = parse(source)
        assert all(isinstance(b, Paragraph) for b in doc)
        assert [b.text for b in doc] == expected
