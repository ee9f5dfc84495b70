"""Tests for inline span formatting."""

from clawmark.nodes import Bold, Code, Link, Paragraph, Text
from clawmark.parser import Parser
from clawmark.parsing.inline import (
    format_inline,
    plain_text,
    to_markup,
    try_match_bold,
    try_match_code,
    try_match_link,
)


class TestMatchers:
    """Each matcher returns (prefix, span, suffix) or None."""

    def test_link(self) -> None:
        assert try_match_link("see [a](b) now") == ("see ", Link(label="a", href="b"), " now")

    def test_link_requires_adjacent_paren(self) -> None:
        assert try_match_link("[a] (b)") is None

    def test_link_empty_parts(self) -> None:
        assert try_match_link("[](b)") is None
        assert try_match_link("[a]()") is None

    def test_link_unclosed(self) -> None:
        assert try_match_link("[a](b") is None
        assert try_match_link("[a") is None

    def test_link_skips_bracket_without_paren(self) -> None:
        assert try_match_link("[x] [a](h)") == ("[x] ", Link(label="a", href="h"), "")

    def test_bold(self) -> None:
        assert try_match_bold("a **b** c") == ("a ", Bold(content="b"), " c")

    def test_bold_does_not_span_newline(self) -> None:
        assert try_match_bold("**a\nb**") is None

    def test_bold_needs_content(self) -> None:
        assert try_match_bold("****") is None
        assert try_match_bold("x") is None

    def test_code(self) -> None:
        assert try_match_code("a `b` c") == ("a ", Code(content="b"), " c")

    def test_code_empty_pair(self) -> None:
        assert try_match_code("``") is None


class TestFormatInline:
    def test_bold_and_code(self) -> None:
        assert format_inline("Some **bold** and `code`.") == (
            Text(content="Some "),
            Bold(content="bold"),
            Text(content=" and "),
            Code(content="code"),
            Text(content="."),
        )

    def test_link_then_bold(self) -> None:
        assert format_inline("[Docs](https://x.test) and **bold**") == (
            Link(label="Docs", href="https://x.test"),
            Text(content=" and "),
            Bold(content="bold"),
        )

    def test_two_bolds(self) -> None:
        """Bold closes at the first closing delimiter."""
        assert format_inline("**a** and **b**") == (
            Bold(content="a"),
            Text(content=" and "),
            Bold(content="b"),
        )

    def test_text_before_link_is_formatted(self) -> None:
        assert format_inline("**x** see [y](z)") == (
            Bold(content="x"),
            Text(content=" see "),
            Link(label="y", href="z"),
        )

    def test_empty_text(self) -> None:
        assert format_inline("") == ()

    def test_plain_text(self) -> None:
        assert format_inline("nothing here") == (Text(content="nothing here"),)

    def test_link_label_is_not_formatted(self) -> None:
        assert format_inline("[**x**](h)") == (Link(label="**x**", href="h"),)

    def test_label_runs_to_first_close_bracket(self) -> None:
        assert format_inline("[a [b](c)") == (Link(label="a [b", href="c"),)

    def test_href_may_contain_spaces(self) -> None:
        assert format_inline("[a](b c)") == (Link(label="a", href="b c"),)


class TestPrecedence:
    """Link beats bold beats code, wherever each occurs in the text."""

    def test_bold_found_before_earlier_code(self) -> None:
        assert format_inline("`a` then **b**") == (
            Text(content="`a` then "),
            Bold(content="b"),
        )

    def test_bold_inside_backticks(self) -> None:
        assert format_inline("`**x**`") == (
            Text(content="`"),
            Bold(content="x"),
            Text(content="`"),
        )

    def test_link_inside_bold_markers(self) -> None:
        assert format_inline("**a [l](h) b**") == (
            Text(content="**a "),
            Link(label="l", href="h"),
            Text(content=" b**"),
        )

    def test_link_prefix_uses_same_precedence(self) -> None:
        assert format_inline("`c` **b** [l](h)") == (
            Text(content="`c` "),
            Bold(content="b"),
            Text(content=" "),
            Link(label="l", href="h"),
        )


class TestUnmatchedDelimiters:
    def test_lone_bold_markers(self) -> None:
        assert format_inline("a ** b") == (Text(content="a ** b"),)
        assert format_inline("****") == (Text(content="****"),)

    def test_five_stars(self) -> None:
        assert format_inline("*****") == (Bold(content="*"),)

    def test_lone_backtick(self) -> None:
        assert format_inline("it`s") == (Text(content="it`s"),)

    def test_empty_backticks_then_code(self) -> None:
        """The second backtick of an empty pair may open a span."""
        assert format_inline("`` `x`") == (
            Text(content="`"),
            Code(content=" "),
            Text(content="x`"),
        )

    def test_broken_link(self) -> None:
        assert format_inline("[a](b") == (Text(content="[a](b"),)


class TestHelpers:
    def test_to_markup_restores_source(self) -> None:
        text = "`a` [l](h) **b** tail"
        assert to_markup(format_inline(text)) == text

    def test_plain_text(self) -> None:
        spans = format_inline("See [the docs](https://x.test) for **more** `info`")
        assert plain_text(spans) == "See the docs for more info"


class TestBlockSpans:
    """Text-bearing blocks format their text on demand."""

    def test_paragraph_spans(self) -> None:
        para = Parser("Some **bold** and `code`.").parse()[0]
        assert isinstance(para, Paragraph)
        assert para.spans() == format_inline("Some **bold** and `code`.")

    def test_list_item_spans(self) -> None:
        lst = Parser("- **a**\n- [b](c)").parse()[0]
        assert lst.item_spans() == (
            (Bold(content="a"),),
            (Link(label="b", href="c"),),
        )

    def test_table_cell_spans(self) -> None:
        table = Parser("| **H** | x |\n|---|---|\n| `c` | y |").parse()[0]
        assert table.header_spans() == ((Bold(content="H"),), (Text(content="x"),))
        assert table.row_spans() == (((Code(content="c"),), (Text(content="y"),)),)
