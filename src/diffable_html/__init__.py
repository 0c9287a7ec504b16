"""
diffable_html: diff-friendly HTML formatting for snapshot tests

Renders markup into a deterministic, indentation-stable text form so that
snapshot diffs only touch the lines of the subtree that actually changed.

Quick Start:
    >>> from diffable_html import format_markup
    >>> print(format_markup('<ul id="nav" class="list"><li>One</li></ul>', formatter="diffable"))
    <ul
      id="nav"
      class="list"
    >
      <li>
        One
      </li>
    </ul>

    >>> # Or work with trees directly
    >>> from diffable_html import DiffableRenderer, FormattingConfig, VoidElements, parse_fragment
    >>> tree = parse_fragment("<input><br>")
    >>> DiffableRenderer(FormattingConfig(void_elements=VoidElements.HTML)).render(tree)
    '<input>\\n<br>'

Installation:
    pip install diffable-html
"""

from collections.abc import Mapping
from typing import Any

from diffable_html.config import (
    FormattingConfig,
    VoidElements,
    formatting_config_context,
    get_formatting_config,
    reset_formatting_config,
    resolve_config,
    set_formatting_config,
)
from diffable_html.elements import (
    ESCAPABLE_RAW_TEXT_ELEMENTS,
    SELF_CLOSING_SVG_ELEMENTS,
    VOID_ELEMENTS,
)
from diffable_html.errors import DiffableError, RenderError
from diffable_html.formatter import (
    DIFFABLE,
    diffable_formatter,
    format_markup,
    is_html_string,
    markup_formatter,
)
from diffable_html.nodes import Comment, Element, Fragment, Node, Text
from diffable_html.parser import parse_fragment
from diffable_html.renderers import DiffableRenderer, RenderState

__version__ = "0.1.0"


def render(tree: Fragment, config: FormattingConfig | Mapping[str, Any] | None = None) -> str:
    """Render a parsed tree to diffable text.

    Args:
        tree: Fragment to render
        config: FormattingConfig or partial option mapping (context
            configuration if None)

    Example:
        >>> print(render(parse_fragment("<p>Hello</p>")))
        <p>
          Hello
        </p>
    """
    return DiffableRenderer(resolve_config(config)).render(tree)


__all__ = [
    "Comment",
    "DIFFABLE",
    "DiffableError",
    "DiffableRenderer",
    "ESCAPABLE_RAW_TEXT_ELEMENTS",
    "Element",
    "FormattingConfig",
    "Fragment",
    "Node",
    "RenderError",
    "RenderState",
    "SELF_CLOSING_SVG_ELEMENTS",
    "Text",
    "VOID_ELEMENTS",
    "VoidElements",
    "__version__",
    "diffable_formatter",
    "format_markup",
    "formatting_config_context",
    "get_formatting_config",
    "is_html_string",
    "markup_formatter",
    "parse_fragment",
    "render",
    "reset_formatting_config",
    "resolve_config",
    "set_formatting_config",
]
