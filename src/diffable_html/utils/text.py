"""Text helpers for the diffable formatter."""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters in text node content.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Examples:
        >>> escape_html("Tom & Jerry")
        'Tom &amp; Jerry'
        >>> escape_html("<b>'hi'</b>")
        '&lt;b&gt;&#x27;hi&#x27;&lt;/b&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True)


def indentation(level: int) -> str:
    """Two spaces per nesting level."""
    return "  " * level
