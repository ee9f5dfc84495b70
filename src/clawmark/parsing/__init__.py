"""Parsing building blocks for clawmark.

- cursor: forward-only line cursor
- blocks: line classifiers and block rules
- table: pipe table splitting
- inline: span formatter for links, bold and inline code
"""

from clawmark.parsing.blocks import BlockParsingMixin
from clawmark.parsing.cursor import LineCursor
from clawmark.parsing.inline import (
    format_inline,
    plain_text,
    to_markup,
    try_match_bold,
    try_match_code,
    try_match_link,
)
from clawmark.parsing.table import TableParsingMixin, split_table_row

__all__ = [
    "BlockParsingMixin",
    "LineCursor",
    "TableParsingMixin",
    "format_inline",
    "plain_text",
    "split_table_row",
    "to_markup",
    "try_match_bold",
    "try_match_code",
    "try_match_link",
]
