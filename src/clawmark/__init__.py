"""
clawmark: lightweight documentation markup parser

Parses a small markdown-like dialect (## / ### headings, fenced code,
blockquotes, pipe tables, lists, horizontal rules, paragraphs) into an
immutable, renderer-agnostic document model, and formats inline text
(links, **bold**, `code`) into spans on demand.

Quick Start:
    >>> from clawmark import parse, format_inline
    >>> doc = parse("## Title\\n\\nSome **bold** and `code`.")
    >>> doc[0]
    Heading(location=..., level=2, text='Title')
    >>> doc[1].spans()
    (Text(content='Some '), Bold(content='bold'), Text(content=' and '), Code(content='code'), Text(content='.'))

    >>> # Or parse and render in one go
    >>> from clawmark import Markdown
    >>> md = Markdown()
    >>> html = md("## Hello **World**")

Parsing never fails: anything the dialect does not recognize becomes a
paragraph, and unmatched inline delimiters stay literal text.
"""

from collections.abc import Callable, Iterable

from clawmark.cache import DictParseCache, ParseCache, hash_config, hash_content
from clawmark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from clawmark.errors import ClawmarkError, RenderError
from clawmark.location import SourceLocation
from clawmark.nodes import (
    Block,
    Blockquote,
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Link,
    OrderedList,
    Paragraph,
    Span,
    Table,
    Text,
    UnorderedList,
)
from clawmark.parser import Parser
from clawmark.parsing.inline import format_inline, plain_text, to_markup
from clawmark.profiling import ParseAccumulator, get_parse_accumulator, profiled_parse
from clawmark.renderers.html import HtmlRenderer
from clawmark.renderers.protocol import ASTRenderer
from clawmark.renderers.text import TextRenderer
from clawmark.serialization import from_dict, from_json, to_dict, to_json
from clawmark.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def _parse_document(
    source: str,
    config: ParseConfig,
    source_file: str | None,
    cache: ParseCache | None,
) -> Document:
    """Parse with the given config already active, consulting the cache."""
    config_hash = hash_config(config) if cache is not None else ""
    use_cache = cache is not None and bool(config_hash)

    if use_cache:
        cached = cache.get(hash_content(source), config_hash)
        if cached is not None:
            return cached

    blocks = Parser(source, source_file=source_file).parse()
    doc = Document(
        location=SourceLocation(
            lineno=1,
            end_lineno=source.count("\n") + 1,
            source_file=source_file,
        ),
        children=blocks,
    )

    if use_cache:
        cache.put(hash_content(source), config_hash, doc)

    acc = get_parse_accumulator()
    if acc is not None:
        acc.record_parse(source, blocks)

    return doc


def parse(
    source: str,
    *,
    source_file: str | None = None,
    cache: ParseCache | None = None,
) -> Document:
    """Parse documentation source into a Document.

    Uses the configuration active in the current context (see
    ``parse_config_context``).

    Args:
        source: Document source text
        source_file: Optional source file path recorded in locations
        cache: Optional content-addressed parse cache. Bypassed when the
            active config has a text_transformer.

    Returns:
        Document whose children are the parsed blocks in source order

    Example:
        >>> doc = parse("| A | B |\\n|---|---|\\n| 1 | 2 |")
        >>> doc[0].headers, doc[0].rows
        (('A', 'B'), (('1', '2'),))
    """
    return _parse_document(source, get_parse_config(), source_file, cache)


def render(doc: Document) -> str:
    """Render a Document to HTML."""
    return HtmlRenderer().render(doc)


def render_text(doc: Document) -> str:
    """Render a Document to structured plain text."""
    return TextRenderer().render(doc)


class Markdown:
    """High-level processor combining parser and HTML renderer.

    Usage:
        >>> md = Markdown()
        >>> md("## Hello **World**")
        '<h2 id="hello-world">Hello <strong>World</strong></h2>\\n'

        >>> md = Markdown(tables=False)
        >>> doc = md.parse("| not | a table |\\n|---|---|")

    Thread Safety:
        Uses ContextVar for configuration. Safe to use multiple Markdown
        instances concurrently from different threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        *,
        tables: bool = True,
        text_transformer: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            tables: Recognize pipe tables
            text_transformer: Optional callback applied to raw inline text
                at parse time
        """
        self._config = ParseConfig(tables_enabled=tables, text_transformer=text_transformer)
        self._renderer = HtmlRenderer()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render to HTML in one call."""
        return self._renderer.render(self.parse(source))

    def parse(
        self,
        source: str,
        *,
        source_file: str | None = None,
        cache: ParseCache | None = None,
    ) -> Document:
        """Parse source into a Document using this instance's config."""
        with parse_config_context(self._config):
            return _parse_document(source, self._config, source_file, cache)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        cache: ParseCache | None = None,
    ) -> list[Document]:
        """Parse several sources with one config switch.

        Duplicate sources within the batch hit the cache when one is given.
        """
        with parse_config_context(self._config):
            return [
                _parse_document(source, self._config, None, cache) for source in sources
            ]

    def render(self, doc: Document) -> str:
        """Render a Document to HTML."""
        return self._renderer.render(doc)


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "parse",
    "format_inline",
    "render",
    "render_text",
    "Markdown",
    # Inline helpers
    "plain_text",
    "to_markup",
    # Block nodes
    "Block",
    "Blockquote",
    "CodeBlock",
    "Document",
    "Heading",
    "HorizontalRule",
    "OrderedList",
    "Paragraph",
    "Table",
    "UnorderedList",
    # Spans
    "Span",
    "Bold",
    "Code",
    "Link",
    "Text",
    # Parser
    "Parser",
    # Renderers
    "ASTRenderer",
    "HtmlRenderer",
    "TextRenderer",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    # Parse cache
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
    # Profiling
    "ParseAccumulator",
    "get_parse_accumulator",
    "profiled_parse",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "ClawmarkError",
    "RenderError",
    # Location
    "SourceLocation",
]
