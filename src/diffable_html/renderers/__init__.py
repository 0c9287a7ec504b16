"""diffable_html renderers.

Available Renderers:
- DiffableRenderer: Renders a markup tree to indentation-stable, diff-friendly text

Thread Safety:
Renderers keep traversal state local to each render() call.
Safe for concurrent use from multiple threads.

"""

from diffable_html.renderers.diffable import DiffableRenderer, RenderState, should_self_close

__all__ = ["DiffableRenderer", "RenderState", "should_self_close"]
