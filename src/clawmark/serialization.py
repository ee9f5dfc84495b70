"""JSON round-trip for clawmark nodes.

Converts block and span nodes to/from JSON-compatible dicts. Useful for
caching parsed documentation on disk, shipping it to a front end that
renders it, and debugging.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from clawmark import parse
    from clawmark.serialization import to_json, from_json

    doc = parse("## Hello **World**")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from clawmark.location import SourceLocation
from clawmark.nodes import (
    Blockquote,
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Link,
    Node,
    OrderedList,
    Paragraph,
    Span,
    Table,
    Text,
    UnorderedList,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Document": Document,
    "Heading": Heading,
    "Paragraph": Paragraph,
    "CodeBlock": CodeBlock,
    "Blockquote": Blockquote,
    "Table": Table,
    "UnorderedList": UnorderedList,
    "OrderedList": OrderedList,
    "HorizontalRule": HorizontalRule,
    "Text": Text,
    "Bold": Bold,
    "Code": Code,
    "Link": Link,
}


def to_dict(node: Node | Span) -> dict[str, Any]:
    """Convert a block or span to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "end_lineno": value.end_lineno,
            "source_file": value.source_file,
        }
    if type(value).__name__ in _NODE_TYPES:
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, None
    return value


def from_dict(data: dict[str, Any]) -> Node | Span:
    """Reconstruct a typed node from a dict produced by to_dict.

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name in data:
            kwargs[f.name] = _deserialize_value(data[f.name])

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        type_name = value.get("_type")
        if type_name == "SourceLocation":
            return SourceLocation(
                lineno=value["lineno"],
                end_lineno=value["end_lineno"],
                source_file=value.get("source_file"),
            )
        if type_name is not None:
            return from_dict(value)
        return value
    if isinstance(value, list):
        # Lists are always tuples on the node side (children, items, rows, cells)
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string with sorted keys."""
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
