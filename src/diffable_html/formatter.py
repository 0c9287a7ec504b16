"""Formatter dispatch.

Chooses between a user-supplied formatting function, the built-in
"diffable" formatter, or no formatting at all.

Example:
    >>> format_markup("<p>Hi</p>", formatter="diffable")
    '<p>\\n  Hi\\n</p>'
    >>> format_markup("<p>Hi</p>", formatter=str.upper)
    '<P>HI</P>'
    >>> format_markup("<p>Hi</p>")
    '<p>Hi</p>'

"""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from diffable_html.config import FormattingConfig, resolve_config
from diffable_html.nodes import Fragment
from diffable_html.parser import parse_fragment
from diffable_html.renderers.diffable import DiffableRenderer
from diffable_html.utils.logger import get_logger

logger = get_logger(__name__)

DIFFABLE = "diffable"

CONTRACT_VIOLATION_MESSAGE = "Your custom markup formatter must return a string."

ConfigInput: TypeAlias = FormattingConfig | Mapping[str, Any] | None


def diffable_formatter(markup: str | Fragment | None, config: ConfigInput = None) -> str:
    """Format markup to be easily diffable.

    Args:
        markup: HTML fragment, or an already parsed Fragment
        config: FormattingConfig, partial option mapping, or None for the
            context configuration

    Returns:
        Formatted markup, "" for empty input
    """
    tree = markup if isinstance(markup, Fragment) else parse_fragment(markup)
    return DiffableRenderer(resolve_config(config)).render(tree)


def format_markup(
    markup: str,
    formatter: Callable[[str], Any] | str | None = None,
    config: ConfigInput = None,
) -> str:
    """Apply the selected formatter to markup.

    Args:
        markup: Any HTML markup string
        formatter: A callable returning a string, ``"diffable"`` for the
            built-in formatter, anything else for no formatting
        config: Options for the built-in formatter

    Returns:
        The formatted markup. A custom formatter that does not return a
        string is reported with a warning and the markup is returned as-is.
    """
    if callable(formatter):
        result = formatter(markup)
        if isinstance(result, str):
            return result
        logger.warning(CONTRACT_VIOLATION_MESSAGE)
        return markup
    if formatter == DIFFABLE:
        return diffable_formatter(markup, config)
    return markup


def is_html_string(value: object) -> bool:
    """Whether ``value`` is a string that looks like markup."""
    return isinstance(value, str) and value.lstrip().startswith("<")


def markup_formatter(markup: Any, config: ConfigInput = None) -> Any:
    """Format markup with the diffable formatter, leaving anything else alone.

    Intended for use as a standalone helper in snapshot tests: values that
    are not markup strings are returned unchanged.
    """
    if not is_html_string(markup):
        return markup
    return diffable_formatter(markup, config)


__all__ = [
    "CONTRACT_VIOLATION_MESSAGE",
    "DIFFABLE",
    "diffable_formatter",
    "format_markup",
    "is_html_string",
    "markup_formatter",
]
