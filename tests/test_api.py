"""Tests for the top-level clawmark API."""

import tomllib
from pathlib import Path

import clawmark
from clawmark import (
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    Link,
    Markdown,
    Paragraph,
    Table,
    Text,
    format_inline,
    parse,
    render,
    render_text,
)


def test_version_matches_pyproject() -> None:
    """__version__ stays in sync with the packaging metadata."""
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with pyproject.open("rb") as f:
        data = tomllib.load(f)
    assert clawmark.__version__ == data["project"]["version"]


def test_all_exports_resolve() -> None:
    for name in clawmark.__all__:
        assert hasattr(clawmark, name), name


class TestParse:
    def test_heading_and_formatted_paragraph(self) -> None:
        doc = parse("## Title\n\nSome **bold** and `code`.")
        assert isinstance(doc, Document)
        assert len(doc) == 2
        heading, para = doc
        assert isinstance(heading, Heading)
        assert (heading.level, heading.text) == (2, "Title")
        assert isinstance(para, Paragraph)
        assert para.spans() == (
            Text(content="Some "),
            Bold(content="bold"),
            Text(content=" and "),
            Code(content="code"),
            Text(content="."),
        )

    def test_code_block_then_heading(self) -> None:
        doc = parse("```\none\ntwo\nthree\n```\n## Next")
        assert isinstance(doc[0], CodeBlock)
        assert doc[0].code == "one\ntwo\nthree"
        assert isinstance(doc[1], Heading)
        assert doc[1].text == "Next"

    def test_table(self) -> None:
        doc = parse("| A | B |\n|---|---|\n| 1 | 2 |\n| 3 | 4 |")
        table = doc[0]
        assert isinstance(table, Table)
        assert table.headers == ("A", "B")
        assert table.rows == (("1", "2"), ("3", "4"))

    def test_link_and_bold(self) -> None:
        assert format_inline("[Docs](https://x.test) and **bold**") == (
            Link(label="Docs", href="https://x.test"),
            Text(content=" and "),
            Bold(content="bold"),
        )

    def test_document_location_covers_source(self) -> None:
        doc = parse("a\nb\nc\n", source_file="page.md")
        assert doc.location.lineno == 1
        assert doc.location.end_lineno == 4
        assert doc.location.source_file == "page.md"
        assert doc[0].location.source_file == "page.md"

    def test_empty_document(self) -> None:
        doc = parse("")
        assert doc.children == ()
        assert not doc

    def test_parse_is_deterministic(self) -> None:
        source = "## A\n- b\n| c | d |\n|---|---|\n```\ne\n```"
        assert parse(source) == parse(source)


class TestRenderShortcuts:
    def test_render_html(self) -> None:
        assert render(parse("Hello **World**")) == "<p>Hello <strong>World</strong></p>\n"

    def test_render_text(self) -> None:
        assert render_text(parse("## Setup\n\n1. Install\n2. Run")) == (
            "## Setup\n\n1. Install\n2. Run\n\n"
        )


class TestMarkdown:
    def test_call_renders_html(self) -> None:
        md = Markdown()
        assert md("## Hello **World**") == (
            '<h2 id="hello-world">Hello <strong>World</strong></h2>\n'
        )

    def test_tables_disabled(self) -> None:
        md = Markdown(tables=False)
        doc = md.parse("| a | b |\n|---|---|")
        assert [type(b).__name__ for b in doc] == ["Paragraph", "Paragraph"]

    def test_config_does_not_leak(self) -> None:
        Markdown(tables=False).parse("| a |\n|---|")
        assert isinstance(parse("| a |\n|---|")[0], Table)

    def test_text_transformer(self) -> None:
        md = Markdown(text_transformer=lambda s: s.replace("{{name}}", "Clawmark"))
        doc = md.parse("## Welcome to {{name}}\n```\n{{name}}\n```")
        assert doc[0].text == "Welcome to Clawmark"
        assert doc[1].code == "{{name}}"

    def test_config_property(self) -> None:
        md = Markdown(tables=False)
        assert md.config.tables_enabled is False
        assert md.config.text_transformer is None

    def test_parse_many(self) -> None:
        docs = Markdown().parse_many(["## A", "- b", ""])
        assert [len(d) for d in docs] == [1, 1, 0]

    def test_render_method(self) -> None:
        md = Markdown()
        assert md.render(md.parse("---")) == "<hr />\n"
