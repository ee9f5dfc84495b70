"""Text processing utilities for clawmark.

Example:
    >>> from clawmark.utils.text import slugify
    >>> slugify("Getting Started!")
    'getting-started'
"""

from __future__ import annotations

import html as html_module
import re


def slugify(text: str, separator: str = "-") -> str:
    """Convert heading text to a URL-safe anchor slug.

    Keeps Unicode word characters so non-English headings still get
    readable anchors.

    Examples:
        >>> slugify("Connect a channel")
        'connect-a-channel'
        >>> slugify("API & SDKs")
        'api-sdks'
        >>> slugify("Café")
        'café'
    """
    if not text:
        return ""

    text = html_module.unescape(text).lower().strip()
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[-\s]+", separator, text)
    return text.strip(separator)


def escape_html(text: str) -> str:
    """Escape HTML special characters for text and attribute values.

    Examples:
        >>> escape_html('<a href="x">')
        '&lt;a href=&quot;x&quot;&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True)
