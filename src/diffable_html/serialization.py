"""Tree serialization: JSON round-trip for markup trees.

Converts node trees to/from JSON-compatible dicts so pre-built trees can be
stored alongside snapshots and fed straight to the renderer without
re-parsing.

All output is deterministic (sorted keys).

Example:
    from diffable_html.parser import parse_fragment
    from diffable_html.serialization import to_json, from_json

    tree = parse_fragment('<p class="x">Hello</p>')
    restored = from_json(to_json(tree))
    assert tree == restored

Thread Safety:
    All functions are pure: safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from diffable_html.nodes import Comment, Element, Fragment, Node, Text

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    "Fragment": Fragment,
    "Element": Element,
    "Text": Text,
    "Comment": Comment,
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Attributes become ``[name, value]`` pairs, order preserved.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str
    return value


def from_dict(data: dict[str, Any]) -> Node:
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
        kwargs[f.name] = _deserialize_value(data[f.name])

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(tree: Fragment, *, indent: int | None = None) -> str:
    """Serialize a Fragment to a JSON string.

    Args:
        tree: Fragment to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(tree), sort_keys=True, indent=indent)


def from_json(data: str) -> Fragment:
    """Deserialize a Fragment from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Fragment.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Fragment):
        msg = f"Expected Fragment, got {type(node).__name__}"
        raise ValueError(msg)
    return node


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
