"""Typed markup tree nodes for diffable_html.

All nodes are frozen dataclasses with slots for:
- Immutability: trees can be shared across threads and renders
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── Fragment (root container, no tag or attributes)
├── Element (tag, ordered attributes, children)
├── Text (raw character data, may be whitespace-only)
└── Comment (raw comment payload, may span lines)

A tree is a strict hierarchy: each non-root node has exactly one parent and
traversal order equals document order.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all markup tree nodes."""


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Character data between tags.

    Holds the value exactly as the parser produced it (entities decoded,
    whitespace untouched).

    """

    value: str


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """HTML comment.

    Markup: <!-- data -->
    ``data`` is everything between ``<!--`` and ``-->``, verbatim.

    """

    data: str


@dataclass(frozen=True, slots=True)
class Element(Node):
    """A tagged element.

    Attributes are kept as ordered ``(name, value)`` pairs. Order is significant.
    Parsed trees keep only the first of duplicate names; hand-built trees may
    repeat a name and it is rendered as given. Valueless attributes carry an
    empty string value.

    """

    tag: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()

    @property
    def has_children(self) -> bool:
        return bool(self.children)


@dataclass(frozen=True, slots=True)
class Fragment(Node):
    """Root container holding top-level sibling nodes."""

    children: tuple[Node, ...] = ()


__all__ = [
    "Comment",
    "Element",
    "Fragment",
    "Node",
    "Text",
]
