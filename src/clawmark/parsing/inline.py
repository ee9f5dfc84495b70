"""Inline formatting for clawmark.

Turns the raw text of a block into a flat tuple of spans: plain text, bold,
inline code and links.

Precedence is global, not positional. Each round looks for a link anywhere
in the remaining text, then (only if there is none) for bold anywhere, then
for code anywhere. So in "`a` and **b**" the bold is found first and the
code before it stays plain text. Text in front of a link is formatted for
bold and code only.

Matchers are small explicit scanners returning ``(prefix, span, suffix)``;
no regex backtracking is involved.

Thread Safety:
All functions are pure. Safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from clawmark.nodes import Bold, Code, Link, Span, Text

type Match = tuple[str, Span, str]
type Matcher = Callable[[str], Match | None]


def try_match_link(text: str) -> Match | None:
    """Find the leftmost ``[label](href)``.

    The label runs to the first ``]`` and the href to the first ``)``;
    neither may be empty.
    """
    start = text.find("[")
    while start != -1:
        close = text.find("]", start + 1)
        if close == -1:
            return None
        if close > start + 1 and text.startswith("(", close + 1):
            end = text.find(")", close + 2)
            if end == -1:
                # No ")" anywhere further on, so no later "[" can match either
                return None
            if end > close + 2:
                span = Link(label=text[start + 1 : close], href=text[close + 2 : end])
                return text[:start], span, text[end + 1 :]
        start = text.find("[", start + 1)
    return None


def try_match_bold(text: str) -> Match | None:
    """Find the leftmost ``**content**``.

    Closes at the first ``**`` after at least one character of content, so
    ``**a** and **b**`` yields two matches. Content never spans a newline.
    """
    start = text.find("**")
    while start != -1:
        end = text.find("**", start + 3)
        if end == -1:
            return None
        content = text[start + 2 : end]
        if "\n" not in content:
            return text[:start], Bold(content=content), text[end + 2 :]
        start = text.find("**", start + 1)
    return None


def try_match_code(text: str) -> Match | None:
    """Find the leftmost `` `content` `` with non-empty content."""
    start = text.find("`")
    while start != -1:
        end = text.find("`", start + 1)
        if end == -1:
            return None
        if end > start + 1:
            return text[:start], Code(content=text[start + 1 : end]), text[end + 1 :]
        # Empty pair: the second backtick may open the next span
        start = end
    return None


_PLAIN_MATCHERS: tuple[Matcher, ...] = (try_match_bold, try_match_code)


def _format_plain(text: str) -> list[Span]:
    """Format text for bold and code only; links are left as literal text."""
    spans: list[Span] = []
    remaining = text
    while remaining:
        for matcher in _PLAIN_MATCHERS:
            match = matcher(remaining)
            if match is not None:
                prefix, span, remaining = match
                if prefix:
                    spans.append(Text(content=prefix))
                spans.append(span)
                break
        else:
            spans.append(Text(content=remaining))
            break
    return spans


def format_inline(text: str) -> tuple[Span, ...]:
    """Format raw inline text into spans.

    Total and deterministic: unmatched delimiters stay as literal text and
    empty text yields no spans.

    Example:
        >>> format_inline("[Docs](https://x.test) and **bold**")
        (Link(label='Docs', href='https://x.test'), Text(content=' and '), Bold(content='bold'))
    """
    spans: list[Span] = []
    remaining = text
    while remaining:
        match = try_match_link(remaining)
        if match is None:
            # No link left anywhere; bold and code cover the rest
            spans.extend(_format_plain(remaining))
            break
        prefix, link, remaining = match
        spans.extend(_format_plain(prefix))
        spans.append(link)
    return tuple(spans)


def to_markup(spans: Iterable[Span]) -> str:
    """Rebuild source text from spans by re-inserting delimiters.

    ``to_markup(format_inline(s)) == s`` for every string ``s``.
    """
    parts: list[str] = []
    for span in spans:
        match span:
            case Text(content=content):
                parts.append(content)
            case Bold(content=content):
                parts.append(f"**{content}**")
            case Code(content=content):
                parts.append(f"`{content}`")
            case Link(label=label, href=href):
                parts.append(f"[{label}]({href})")
    return "".join(parts)


def plain_text(spans: Iterable[Span]) -> str:
    """Visible text of spans with all markup dropped (link labels only)."""
    parts: list[str] = []
    for span in spans:
        match span:
            case Link(label=label):
                parts.append(label)
            case Text(content=content) | Bold(content=content) | Code(content=content):
                parts.append(content)
    return "".join(parts)
