"""Typed document walk: collect headings and links for a page index."""

from clawmark import parse
from clawmark.nodes import Heading, Link
from clawmark.parsing.inline import plain_text
from clawmark.visitor import BaseVisitor


class PageIndex(BaseVisitor[None]):
    """Collect headings for a table of contents and every link target."""

    def __init__(self) -> None:
        self.headings: list[tuple[int, str]] = []
        self.links: list[str] = []

    def visit_heading(self, node: Heading) -> None:
        self.headings.append((node.level, plain_text(node.spans())))

    def visit_link(self, node: Link) -> None:
        self.links.append(node.href)


source = """## Getting Started

Deploy your first agent in minutes. See [pricing](/pricing).

### Create your account

1. Sign up at [the console](https://console.example.test)
2. Verify your email

### Connect a channel

| Channel | Setup |
|---------|-------|
| Telegram | [guide](/docs/telegram) |
| Slack | [guide](/docs/slack) |
"""

index = PageIndex()
index.visit(parse(source))

print("Table of Contents:")
for level, text in index.headings:
    indent = "  " * (level - 2)
    print(f"{indent}{'#' * level} {text}")

print("\nLinks:")
for href in index.links:
    print(f"  {href}")
