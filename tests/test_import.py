"""Verify package imports work correctly."""


def test_import_diffable_html() -> None:
    """Test that diffable_html can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import diffable_html

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert diffable_html.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from diffable_html import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_top_level_render() -> None:
    """The package-level render() uses the context configuration."""
    from diffable_html import parse_fragment, render

    assert render(parse_fragment("<p>Hello</p>")) == "<p>\n  Hello\n</p>"
    assert render(parse_fragment("<br>"), {"voidElements": "html"}) == "<br>"
