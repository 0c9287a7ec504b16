"""Formatting configuration for the diffable renderer.

``FormattingConfig`` is an immutable value resolved once per formatting call.
Partial user input (a dict using either the camelCase option names or the
attribute names) is resolved softly: every missing or mistyped field falls
back to its default independently, and resolution never fails.

A ContextVar holds the configuration used when a caller passes none, so test
suites can set it once per session or per test without threading it through
every call.

Usage:
    from diffable_html.config import FormattingConfig, formatting_config_context

    config = FormattingConfig.from_dict({"attributesPerLine": 2, "voidElements": "html"})

    with formatting_config_context(config):
        html = format_markup(markup, formatter="diffable")

Thread Safety:
    FormattingConfig is frozen. ContextVars are thread-local by design, so
    setting the context configuration in one thread never affects another.

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Any

from diffable_html.utils.logger import get_logger

logger = get_logger(__name__)


class VoidElements(StrEnum):
    """How void elements (and self-closing SVG shapes) terminate.

    HTML: ``<input>``, no closing tag; SVG shapes still self-close.
    XHTML: ``<input />``; SVG shapes self-close.
    CLOSING_TAG: ``<input></input>``, same for SVG shapes.
    """

    HTML = "html"
    XHTML = "xhtml"
    CLOSING_TAG = "closingTag"

    @classmethod
    def coerce(cls, value: Any) -> "VoidElements | None":
        """Map user input to a member, or None when it is not recognised.

        ``"xml"`` is accepted as an alias of ``"closingTag"``.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        if value == "xml":
            return cls.CLOSING_TAG
        try:
            return cls(value)
        except ValueError:
            return None


DEFAULT_WHITESPACE_PRESERVED_TAGS: tuple[str, ...] = ("a", "pre")

# Option names as written in user configuration -> dataclass field names
OPTION_ALIASES: dict[str, str] = {
    "emptyAttributes": "empty_attributes",
    "voidElements": "void_elements",
    "selfClosingTag": "self_closing_tag",
    "attributesPerLine": "attributes_per_line",
    "escapeInnerText": "escape_inner_text",
    "tagsWithWhitespacePreserved": "tags_with_whitespace_preserved",
}

_INVALID = object()


def _coerce_option(name: str, value: Any) -> Any:
    """Validate one option value, returning _INVALID when it must be defaulted."""
    match name:
        case "empty_attributes" | "self_closing_tag" | "escape_inner_text":
            return value if isinstance(value, bool) else _INVALID
        case "attributes_per_line":
            # bool is an int subclass; True is not a threshold
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                return _INVALID
            return value
        case "void_elements":
            mode = VoidElements.coerce(value)
            return _INVALID if mode is None else mode
        case "tags_with_whitespace_preserved":
            if isinstance(value, bool):
                return value
            if isinstance(value, (list, tuple, set, frozenset)) and all(
                isinstance(tag, str) for tag in value
            ):
                return tuple(value)
            return _INVALID
    return _INVALID


@dataclass(frozen=True, slots=True)
class FormattingConfig:
    """Immutable formatting configuration.

    Attributes:
        empty_attributes: Render valueless attributes as ``name=""`` instead
            of a bare ``name``
        void_elements: Termination style for void elements and SVG shapes
        self_closing_tag: Self-close childless non-void, non-raw-text elements
        attributes_per_line: Attributes stay inline up to this count; above
            it each attribute gets its own line
        escape_inner_text: HTML-escape text node content
        tags_with_whitespace_preserved: Tags whose text is emitted verbatim.
            ``True`` preserves every tag, ``False`` none.

    Direct construction normalizes values the same way ``from_dict`` does.
    Invalid values fall back to the field default.

    """

    empty_attributes: bool = True
    void_elements: VoidElements = VoidElements.XHTML
    self_closing_tag: bool = False
    attributes_per_line: int = 1
    escape_inner_text: bool = True
    tags_with_whitespace_preserved: tuple[str, ...] | bool = DEFAULT_WHITESPACE_PRESERVED_TAGS

    def __post_init__(self) -> None:
        # Normalize in place so direct construction resolves like from_dict
        for f in fields(self):
            value = getattr(self, f.name)
            coerced = _coerce_option(f.name, value)
            if coerced is _INVALID:
                logger.debug("Invalid value %r for formatting option %r, using default", value, f.name)
                coerced = f.default
            object.__setattr__(self, f.name, coerced)

    def preserves_whitespace(self, tag: str) -> bool:
        """Whether text directly inside ``tag`` keeps its original whitespace."""
        preserved = self.tags_with_whitespace_preserved
        if isinstance(preserved, bool):
            return preserved
        return tag in preserved

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "FormattingConfig":
        """Create a FormattingConfig from partial user input.

        Keys may be the camelCase option names (``attributesPerLine``) or
        the attribute names (``attributes_per_line``). Unknown keys are
        ignored and invalid values fall back to the field default; both are
        reported at DEBUG level only.

        Example:
            >>> config = FormattingConfig.from_dict({
            ...     "attributesPerLine": 3,
            ...     "voidElements": "nonsense",
            ... })
            >>> config.attributes_per_line, config.void_elements
            (3, <VoidElements.XHTML: 'xhtml'>)

        """
        valid_fields = {f.name for f in fields(cls)}
        resolved: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in valid_fields:
                logger.debug("Ignoring unknown formatting option %r", key)
                continue
            resolved[name] = value
        return cls(**resolved)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: FormattingConfig = FormattingConfig()

_formatting_config: ContextVar[FormattingConfig] = ContextVar(
    "formatting_config",
    default=_DEFAULT_CONFIG,
)


def get_formatting_config() -> FormattingConfig:
    """Get the formatting configuration of the current context."""
    return _formatting_config.get()


def set_formatting_config(config: FormattingConfig) -> None:
    """Set the formatting configuration for the current context.

    Only affects the current thread's context.
    """
    _formatting_config.set(config)


def reset_formatting_config() -> None:
    """Reset the current context to the default configuration."""
    _formatting_config.set(_DEFAULT_CONFIG)


@contextmanager
def formatting_config_context(config: FormattingConfig) -> Iterator[None]:
    """Context manager for temporary configuration changes.

    Restores the previous configuration even if an exception is raised.

    Example:
        >>> with formatting_config_context(FormattingConfig(attributes_per_line=5)):
        ...     get_formatting_config().attributes_per_line
        5

    """
    previous = _formatting_config.get()
    _formatting_config.set(config)
    try:
        yield
    finally:
        _formatting_config.set(previous)


def resolve_config(config: "FormattingConfig | Mapping[str, Any] | None" = None) -> FormattingConfig:
    """Turn whatever the caller supplied into a FormattingConfig.

    None resolves to the context configuration, a mapping is resolved with
    ``FormattingConfig.from_dict``, and anything unrecognised falls back to
    the defaults.
    """
    if config is None:
        return get_formatting_config()
    if isinstance(config, FormattingConfig):
        return config
    if isinstance(config, Mapping):
        return FormattingConfig.from_dict(config)
    logger.debug("Ignoring formatting configuration of type %s", type(config).__name__)
    return _DEFAULT_CONFIG


__all__ = [
    "DEFAULT_WHITESPACE_PRESERVED_TAGS",
    "FormattingConfig",
    "OPTION_ALIASES",
    "VoidElements",
    "formatting_config_context",
    "get_formatting_config",
    "reset_formatting_config",
    "resolve_config",
    "set_formatting_config",
]
