"""StringBuilder for O(n) output accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation while walking deep trees.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

from diffable_html.utils.text import indentation


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.newline(1).append("<br />")
            >>> sb.build()
            '\\n  <br />'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def newline(self, level: int) -> StringBuilder:
        """Start a new line indented to ``level``."""
        self._parts.append("\n")
        if level > 0:
            self._parts.append(indentation(level))
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)
