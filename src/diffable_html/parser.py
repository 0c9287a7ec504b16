"""Markup string -> node tree.

Parsing is delegated to html5lib's fragment parser, which follows the HTML5
tree construction rules: optional end tags are implied (``<li>a<li>b``
gives two siblings), the first of duplicate attributes wins, and SVG names
keep their camelCase. The etree result is converted into the package's
immutable node tree, keeping what the renderer needs to stay faithful to the
source: attribute order, valueless attributes, exact whitespace text and
verbatim comment payloads.

Example:
    >>> from diffable_html.parser import parse_fragment
    >>> parse_fragment('<p class="x">Hi</p>')
    Fragment(children=(Element(tag='p', attributes=(('class', 'x'),), children=(Text(value='Hi'),)),))

"""

import xml.etree.ElementTree as ET

import html5lib

from diffable_html.nodes import Comment, Element, Fragment, Node, Text
from diffable_html.utils.logger import get_logger

logger = get_logger(__name__)

# Prefixes for the namespaced attributes html5lib produces on foreign content
ATTRIBUTE_PREFIXES: dict[str, str] = {
    "http://www.w3.org/1999/xlink": "xlink",
    "http://www.w3.org/XML/1998/namespace": "xml",
    "http://www.w3.org/2000/xmlns/": "xmlns",
}


def parse_fragment(markup: str | None) -> Fragment:
    """Parse a markup fragment into a Fragment tree.

    Args:
        markup: Any HTML fragment. None and "" produce an empty Fragment.

    Returns:
        Fragment whose children mirror the top-level nodes of the markup
    """
    if not markup:
        return Fragment()

    root = html5lib.parseFragment(markup, treebuilder="etree", namespaceHTMLElements=False)
    return Fragment(children=_convert_children(root))


def _convert_children(parent: ET.Element) -> tuple[Node, ...]:
    # etree keeps text as .text (before the first child) and .tail (after each child)
    children: list[Node] = []
    if parent.text:
        children.append(Text(value=parent.text))
    for child in parent:
        node = _convert(child)
        if node is not None:
            children.append(node)
        if child.tail:
            children.append(Text(value=child.tail))
    return tuple(children)


def _convert(element: ET.Element) -> Node | None:
    if element.tag is ET.Comment:
        return Comment(data=element.text or "")
    if not isinstance(element.tag, str):
        logger.debug("Dropping %r from fragment", element.tag)
        return None
    return Element(
        tag=_local_name(element.tag),
        attributes=tuple((_attribute_name(name), value) for name, value in element.attrib.items()),
        children=_convert_children(element),
    )


def _local_name(tag: str) -> str:
    # SVG and MathML elements carry their namespace: {http://www.w3.org/2000/svg}path
    return tag.split("}", 1)[-1] if "}" in tag else tag


def _attribute_name(name: str) -> str:
    if not name.startswith("{"):
        return name
    namespace, local = name[1:].split("}", 1)
    prefix = ATTRIBUTE_PREFIXES.get(namespace)
    if prefix is None or prefix == local:
        return local
    return f"{prefix}:{local}"


__all__ = ["ATTRIBUTE_PREFIXES", "parse_fragment"]
