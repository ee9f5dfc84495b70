"""Content-addressed parse cache for clawmark.

Provides (content_hash, config_hash) -> Document caching so unchanged
documentation pages are not re-parsed.

Thread Safety:
    DictParseCache is not thread-safe. For parallel parsing, use a cache
    implementation with internal locking (e.g. threading.Lock around get/put).

Example:
    >>> from clawmark import parse, DictParseCache
    >>> cache = DictParseCache()
    >>> doc1 = parse("## Hello", cache=cache)
    >>> doc2 = parse("## Hello", cache=cache)  # Cache hit, no re-parse
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from clawmark.config import ParseConfig
    from clawmark.nodes import Document


class ParseCache(Protocol):
    """Protocol for content-addressed parse caches.

    Cache key is (content_hash, config_hash). Cached value is Document.
    Document is immutable, safe to share across threads.
    """

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        """Return cached Document if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        """Store Document in cache."""
        ...


class DictParseCache:
    """In-memory parse cache using a dict."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], Document] = {}

    def __len__(self) -> int:
        return len(self._data)

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        self._data[(content_hash, config_hash)] = doc

    def clear(self) -> None:
        self._data.clear()


def hash_content(source: str) -> str:
    """SHA256 hex digest of source, for the cache key."""
    return hashlib.sha256(source.encode("utf-8")).hexdigest()


def hash_config(config: ParseConfig) -> str:
    """Compute hash of ParseConfig for cache key.

    When text_transformer is set, returns empty string to disable caching
    (the transformer affects output in a non-hashable way).
    """
    if config.text_transformer is not None:
        return ""
    return hashlib.sha256(f"tables={config.tables_enabled}".encode()).hexdigest()[:16]


__all__ = [
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
]
