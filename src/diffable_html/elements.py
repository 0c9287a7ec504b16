"""Fixed element lookup sets used by the diffable renderer.

Thread Safety:
    All data is immutable (frozensets). Safe to read from any thread.

"""

# From https://developer.mozilla.org/en-US/docs/Glossary/Void_element
VOID_ELEMENTS: frozenset[str] = frozenset({
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
})

# SVG shapes that are conventionally written as <path />
SELF_CLOSING_SVG_ELEMENTS: frozenset[str] = frozenset({
    "circle",
    "ellipse",
    "line",
    "path",
    "polygon",
    "polyline",
    "rect",
    "stop",
    "use",
})

# Never self-closed, closing tag always explicit
ESCAPABLE_RAW_TEXT_ELEMENTS: frozenset[str] = frozenset({
    "textarea",
    "title",
})


def is_void(tag: str) -> bool:
    return tag in VOID_ELEMENTS


def is_self_closing_svg(tag: str) -> bool:
    return tag in SELF_CLOSING_SVG_ELEMENTS


def is_raw_text(tag: str) -> bool:
    return tag in ESCAPABLE_RAW_TEXT_ELEMENTS


__all__ = [
    "ESCAPABLE_RAW_TEXT_ELEMENTS",
    "SELF_CLOSING_SVG_ELEMENTS",
    "VOID_ELEMENTS",
    "is_raw_text",
    "is_self_closing_svg",
    "is_void",
]
