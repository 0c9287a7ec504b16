"""Tests for diffable_html utility modules."""

import logging


class TestEscapeHtml:
    def test_special_characters(self) -> None:
        from diffable_html.utils.text import escape_html

        assert escape_html("<b>\"Tom\" & 'Jerry'</b>") == (
            "&lt;b&gt;&quot;Tom&quot; &amp; &#x27;Jerry&#x27;&lt;/b&gt;"
        )

    def test_plain_text_unchanged(self) -> None:
        from diffable_html.utils.text import escape_html

        assert escape_html("Hello World!") == "Hello World!"

    def test_empty_string(self) -> None:
        from diffable_html.utils.text import escape_html

        assert escape_html("") == ""


class TestIndentation:
    def test_two_spaces_per_level(self) -> None:
        from diffable_html.utils.text import indentation

        assert indentation(0) == ""
        assert indentation(3) == "      "


class TestGetLogger:
    def test_prefix_added(self) -> None:
        from diffable_html.utils.logger import get_logger

        assert get_logger("formatter").name == "diffable_html.formatter"

    def test_prefix_not_duplicated(self) -> None:
        from diffable_html.utils.logger import get_logger

        assert get_logger("diffable_html.parser").name == "diffable_html.parser"
        assert get_logger("diffable_html").name == "diffable_html"

    def test_returns_stdlib_logger(self) -> None:
        from diffable_html.utils.logger import get_logger

        assert isinstance(get_logger("x"), logging.Logger)


class TestStringBuilder:
    def test_append_skips_empty(self) -> None:
        from diffable_html.stringbuilder import StringBuilder

        sb = StringBuilder()
        sb.append("").append("<p>")
        assert sb.build() == "<p>"

    def test_newline_indents(self) -> None:
        from diffable_html.stringbuilder import StringBuilder

        sb = StringBuilder()
        sb.append("<div>").newline(1).append("x").newline(0).append("</div>")
        assert sb.build() == "<div>\n  x\n</div>"

    def test_empty_builder_builds_empty_string(self) -> None:
        from diffable_html.stringbuilder import StringBuilder

        assert StringBuilder().append("").build() == ""
