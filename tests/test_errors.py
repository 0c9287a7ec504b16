"""Error hierarchy and formatting tests."""

from diffable_html.errors import DiffableError, RenderError


class TestRenderError:
    def test_names_offending_type(self) -> None:
        err = RenderError(3.5)
        assert "float" in str(err)
        assert err.node == 3.5
        assert isinstance(err, DiffableError)
