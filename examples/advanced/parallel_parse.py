"""Thread safe: parse 1000 pages in parallel, sharing one cache."""

from concurrent.futures import ThreadPoolExecutor
from threading import Lock

from clawmark import DictParseCache, Document, parse
from clawmark.profiling import profiled_parse


class LockedCache:
    """DictParseCache guarded by a lock for use from several threads."""

    def __init__(self) -> None:
        self._cache = DictParseCache()
        self._lock = Lock()

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        with self._lock:
            return self._cache.get(content_hash, config_hash)

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        with self._lock:
            self._cache.put(content_hash, config_hash, doc)


pages = [f"## Page {i % 100}\n\nContent for page {i % 100}" for i in range(1000)]
cache = LockedCache()

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lambda source: parse(source, cache=cache), pages))

print(f"Parsed {len(results)} pages in parallel")
print("Distinct documents:", len({id(doc) for doc in results}))

with profiled_parse() as metrics:
    for source in pages[:10]:
        parse(source)
print(metrics.summary())
