"""Tree serialization — JSON round-trip for Inkling nodes.

Converts typed nodes to/from JSON-compatible dicts. Useful for caching parsed
trees, sending them to other processes, and debugging.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from inkling import parse
    from inkling.serialization import to_json, from_json

    nodes = parse("a *b* c")
    assert from_json(to_json(nodes)) == nodes

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Iterable
from dataclasses import fields
from typing import Any

from inkling.nodes import Emphasis, Inline, Node, Strikethrough, Strong, Text

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    "Text": Text,
    "Strong": Strong,
    "Emphasis": Emphasis,
    "Strikethrough": Strikethrough,
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Child nodes are serialized recursively.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, tuple):
            value = [to_dict(child) for child in value]
        result[f.name] = value
    return result


def from_dict(data: dict[str, Any]) -> Inline:
    """Reconstruct a typed node from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

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
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name == "children":
            raw = tuple(from_dict(child) for child in raw)
        kwargs[f.name] = raw

    return node_cls(**kwargs)  # type: ignore[return-value]


def to_json(nodes: Iterable[Node], *, indent: int | None = None) -> str:
    """Serialize a sequence of top-level nodes to a JSON array.

    Args:
        nodes: Nodes to serialize, in order.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps([to_dict(node) for node in nodes], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Inline]:
    """Deserialize top-level nodes from a JSON string.

    Raises:
        ValueError: If the JSON is not an array of serialized nodes.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
