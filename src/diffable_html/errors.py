"""Exception classes for diffable_html.

Parsing and formatting never raise for markup strings; these cover
hand-built trees containing foreign objects.
"""

from __future__ import annotations


class DiffableError(Exception):
    """Base exception for all diffable_html errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(DiffableError):
    """Error during diffable rendering.

    Raised when the renderer encounters an object that is not a tree node.
    """

    def __init__(self, node: object) -> None:
        self.node = node
        super().__init__(f"Cannot render object of type {type(node).__name__!r}")
