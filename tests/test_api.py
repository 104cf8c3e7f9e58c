"""Tests for the package-level helpers."""

import aurora_term as aurora
from aurora_term.core.chunk import FormatRequest, TextChunk


class TestQuickHelpers:
    """Tests for the top-level convenience functions."""

    def test_format_with_color_and_bold(self) -> None:
        result = aurora.format("Hi", color="#FF0000", bold=True, width=10)
        assert result == "\x1b[38;2;255;0;0m\x1b[1mHi\x1b[0m\x1b[0m"

    def test_format_plain_text(self) -> None:
        assert aurora.format("Hi", width=10) == "Hi"

    def test_format_list_aligned(self) -> None:
        assert aurora.format(["a", "b"], align="right", width=5) == "   ab"

    def test_format_request(self) -> None:
        assert aurora.format(FormatRequest(chunks=["x"]), width=10) == "x"

    def test_format_chunks(self) -> None:
        result = aurora.format_chunks([aurora.chunk("ab")], align="center", width=6)
        assert result == "  ab  "

    def test_chunk_helpers(self) -> None:
        assert aurora.chunk("x") == TextChunk(text="x")
        assert aurora.chunk("x", "error").color.name == "error"
        assert [c.text for c in aurora.chunks(["a", ("b", "info")])] == ["a", "b"]

    def test_colorize_and_stylize(self) -> None:
        assert aurora.colorize("Hi", "#FF0000") == "\x1b[38;2;255;0;0mHi\x1b[0m"
        assert aurora.stylize("Hi", "bold") == "\x1b[1mHi\x1b[0m"
        assert aurora.stylize("Hi", ["bold", "italic"]) == "\x1b[1m\x1b[3mHi\x1b[0m"

    def test_gradient(self) -> None:
        assert len(aurora.gradient("#000000", "#FFFFFF")) == 6
        assert aurora.gradient("#000000", "#FFFFFF", 2) == ["#000000", "#333333"]

    def test_clean_and_length(self) -> None:
        styled = aurora.colorize(aurora.stylize("Hola", "bold"), "primary")
        assert aurora.clean(styled) == "Hola"
        assert aurora.text_length(styled) == 4

    def test_json(self) -> None:
        assert aurora.clean(aurora.json({"a": 1}, compact=True)) == '{"a":1}'

    def test_listings(self) -> None:
        assert "primary" in aurora.colors()
        assert "no_color" in aurora.colors()
        assert "strikethrough" in aurora.effects()
