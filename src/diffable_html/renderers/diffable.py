"""Diffable renderer: node tree -> indentation-stable text.

Every structural element starts on its own line, two spaces deeper than its
parent, so a change in the markup only moves the lines of the subtree that
changed. Whitespace-significant regions (``<pre>`` and its descendants, and
any tag configured as whitespace-preserved) are emitted without injected
newlines or indentation.

Thread Safety:
Traversal state lives in RenderState values passed down the recursion; the
renderer itself only holds its frozen configuration. Multiple threads can
share a single DiffableRenderer instance and call render() concurrently.

Recursion depth equals tree depth.
"""

from dataclasses import dataclass

from diffable_html.config import FormattingConfig, VoidElements
from diffable_html.elements import is_raw_text, is_self_closing_svg, is_void
from diffable_html.errors import RenderError
from diffable_html.nodes import Comment, Element, Fragment, Node, Text
from diffable_html.stringbuilder import StringBuilder
from diffable_html.utils.text import escape_html, indentation

PRE_TAG = "pre"


@dataclass(frozen=True, slots=True)
class RenderState:
    """Traversal state for one node.

    Attributes:
        indent: Nesting depth, 0 for top-level nodes
        nearest_tag: Tag of the nearest enclosing element ("" at top level)
        pre_depth: Greater than zero inside a ``<pre>`` or any descendant

    Derived states are created with ``enter()``; siblings share their
    parent's state, so leaving a subtree restores the counters.
    """

    indent: int = 0
    nearest_tag: str = ""
    pre_depth: int = 0

    @property
    def in_pre(self) -> bool:
        return self.pre_depth > 0

    def enter(self, tag: str) -> "RenderState":
        """State for the children of an element named ``tag``."""
        pre_depth = self.pre_depth
        if tag == PRE_TAG or pre_depth > 0:
            pre_depth += 1
        return RenderState(indent=self.indent + 1, nearest_tag=tag, pre_depth=pre_depth)


def should_self_close(tag: str, has_children: bool, config: FormattingConfig) -> bool:
    """Decide whether an element is terminated with `` />``.

    In priority order, true when any holds:
    1. SVG shape and void mode is html or xhtml
    2. Void element and void mode is xhtml
    3. Non-void, childless, not raw text, and ``self_closing_tag`` is on
    """
    void = is_void(tag)
    if is_self_closing_svg(tag) and config.void_elements in (VoidElements.HTML, VoidElements.XHTML):
        return True
    if void and config.void_elements == VoidElements.XHTML:
        return True
    return not void and config.self_closing_tag and not has_children and not is_raw_text(tag)


class DiffableRenderer:
    """Render a markup tree to diffable text.

    Usage:
        >>> from diffable_html.parser import parse_fragment
        >>> renderer = DiffableRenderer()
        >>> print(renderer.render(parse_fragment("<div><p>Hi</p></div>")))
        <div>
          <p>
            Hi
          </p>
        </div>

    """

    __slots__ = ("_config",)

    def __init__(self, config: FormattingConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Resolved formatting configuration (defaults if None)
        """
        self._config = config if config is not None else FormattingConfig()

    @property
    def config(self) -> FormattingConfig:
        return self._config

    def render(self, node: Fragment | Node) -> str:
        """Render a tree to a string without leading or trailing whitespace.

        Args:
            node: Fragment root, or a single node rendered as if it were the
                only child of a Fragment

        Returns:
            Formatted markup ("" for an empty fragment)

        Raises:
            RenderError: If the tree contains an object that is not a node
        """
        children = node.children if isinstance(node, Fragment) else (node,)

        sb = StringBuilder()
        state = RenderState()
        for child in children:
            self._render_node(child, sb, state)
        return sb.build().strip()

    def _render_node(self, node: Node, sb: StringBuilder, state: RenderState) -> None:
        match node:
            case Element():
                self._render_element(node, sb, state)
            case Text():
                self._render_text(node, sb, state)
            case Comment():
                self._render_comment(node, sb, state)
            case _:
                raise RenderError(node)

    # =========================================================================
    # Text and comments
    # =========================================================================

    def _render_text(self, node: Text, sb: StringBuilder, state: RenderState) -> None:
        value = node.value
        # Inter-tag whitespace is insignificant
        if not value.strip():
            return

        if self._config.escape_inner_text:
            value = escape_html(value)

        if state.in_pre or self._config.preserves_whitespace(state.nearest_tag):
            sb.append(value)
        else:
            sb.newline(state.indent).append(value.strip())

    def _render_comment(self, node: Comment, sb: StringBuilder, state: RenderState) -> None:
        """Render a comment, re-indenting multi-line payloads.

        ``<!-- Some Text -->`` stays on one line; in

            <!--
              Some
              Text
            -->

        every line but the last is indented one level deeper than the
        comment and the closer lines up with the opener.
        """
        sb.newline(state.indent)
        if not node.data.strip():
            sb.append("<!---->")
            return

        lines = node.data.split("\n")
        last = len(lines) - 1
        formatted: list[str] = []
        for index, line in enumerate(lines):
            if not line:
                formatted.append(line)
            elif index == last:
                formatted.append(line.strip())
            else:
                formatted.append(indentation(state.indent + 1) + line.lstrip())
        payload = "\n".join(formatted)

        if not payload.startswith("\n"):
            payload = " " + payload
        if payload.endswith("\n"):
            payload += indentation(state.indent)
        else:
            payload += " "

        sb.append("<!--").append(payload).append("-->")

    # =========================================================================
    # Elements
    # =========================================================================

    def _render_element(self, node: Element, sb: StringBuilder, state: RenderState) -> None:
        config = self._config
        tag = node.tag
        self_close = should_self_close(tag, node.has_children, config)

        if not state.in_pre:
            sb.newline(state.indent)
        sb.append("<").append(tag)
        self._render_attributes(node, " />" if self_close else ">", sb, state)

        if self_close:
            return

        child_state = state.enter(tag)
        for child in node.children:
            self._render_node(child, sb, child_state)

        self._render_closing_tag(node, sb, state, child_state)

    def _render_attributes(
        self, node: Element, bracket: str, sb: StringBuilder, state: RenderState
    ) -> None:
        if not node.attributes:
            sb.append(bracket)
            return

        rendered = [self._format_attribute(name, value) for name, value in node.attributes]
        if len(rendered) > self._config.attributes_per_line:
            for attribute in rendered:
                sb.newline(state.indent + 1).append(attribute)
            sb.newline(state.indent).append(bracket.strip())
        else:
            for attribute in rendered:
                sb.append(" ").append(attribute)
            sb.append(bracket)

    def _format_attribute(self, name: str, value: str) -> str:
        if value or self._config.empty_attributes:
            return f'{name}="{value}"'
        return name

    def _render_closing_tag(
        self,
        node: Element,
        sb: StringBuilder,
        state: RenderState,
        child_state: RenderState,
    ) -> None:
        config = self._config
        tag = node.tag
        closing_tag_mode = config.void_elements == VoidElements.CLOSING_TAG
        void = is_void(tag)

        if void and not closing_tag_mode:
            return

        inline = (
            config.preserves_whitespace(tag)
            or not node.has_children
            or (closing_tag_mode and (void or is_self_closing_svg(tag)))
            or child_state.in_pre
        )
        if not inline:
            sb.newline(state.indent)
        sb.append("</").append(tag).append(">")


__all__ = ["DiffableRenderer", "RenderState", "should_self_close"]
