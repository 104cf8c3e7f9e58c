"""Tests for the coercion layer."""

from enum import Enum

import pytest

from aurora_term.convert import (
    clean_nil_values,
    deep_merge,
    ensure,
    list_of,
    normalize_messages,
    normalize_table,
    normalize_text,
    to_boolean,
    to_chunk,
    to_chunks,
    to_effect_set,
    to_float,
    to_format_request,
    to_integer,
    to_list,
    to_map,
    to_string,
    to_symbol,
)
from aurora_term.convert.chunks import to_add_line, to_align, to_mode
from aurora_term.core.chunk import AddLine, Align, FormatRequest, Mode, TextChunk
from aurora_term.core.color import Color
from aurora_term.core.effects import EffectSet
from aurora_term.core.palette import Palette


class Shade(Enum):
    DARK = "dark"


class TestScalars:
    """Tests for scalar coercions."""

    def test_to_string(self) -> None:
        assert to_string(None) == ""
        assert to_string("x") == "x"
        assert to_string(12) == "12"
        assert to_string(1.5) == "1.5"
        assert to_string(Shade.DARK) == "dark"
        assert to_string([1, 2]) == "[1, 2]"

    def test_to_integer(self) -> None:
        assert to_integer(7) == 7
        assert to_integer(" 42 ") == 42
        assert to_integer(3.9) == 3
        assert to_integer("4.5") == 0
        assert to_integer("abc") == 0
        assert to_integer(float("nan")) == 0
        assert to_integer(None) == 0

    def test_to_float(self) -> None:
        assert to_float(2) == 2.0
        assert to_float("2.5") == 2.5
        assert to_float("x") == 0.0
        assert to_float([]) == 0.0

    def test_to_boolean(self) -> None:
        assert to_boolean(True) is True
        assert to_boolean("true") is True
        assert to_boolean(" TRUE ") is True
        assert to_boolean("false") is False
        assert to_boolean("yes") is False
        assert to_boolean(1) is False

    def test_to_symbol(self) -> None:
        assert to_symbol(" primary ") == "primary"
        assert to_symbol(Shade.DARK) == "dark"
        assert to_symbol("") == "unknown"
        assert to_symbol(5) == "unknown"


class TestContainers:
    """Tests for list and map coercions."""

    def test_to_list(self) -> None:
        items = [1, 2]
        assert to_list(items) is items
        assert to_list(None) == []
        assert to_list("x") == ["x"]
        assert to_list(("a", "b")) == [("a", "b")]

    def test_to_map(self) -> None:
        assert to_map(None) == {}
        assert to_map({"a": 1}) == {"a": 1}
        assert to_map([("a", 1)]) == {"a": 1}
        assert to_map([1, 2]) == {"value": [1, 2]}
        assert to_map(5) == {"value": 5}

    def test_ensure_dispatch(self) -> None:
        assert ensure("5", "integer") == 5
        assert ensure(5, "string") == "5"
        assert ensure("true", "boolean") is True
        assert ensure(None, "list") == []
        assert ensure("x", "mystery") == "x"

    def test_list_of(self) -> None:
        assert list_of(["1", "x", 3], "integer") == [1, 0, 3]
        assert list_of("7", "integer") == [7]

    def test_deep_merge(self) -> None:
        base = {"a": {"b": 1, "c": 2}, "d": 1}
        merged = deep_merge(base, {"a": {"c": 3}, "e": 5})
        assert merged == {"a": {"b": 1, "c": 3}, "d": 1, "e": 5}
        assert base["a"]["c"] == 2

    def test_clean_nil_values(self) -> None:
        assert clean_nil_values({"a": None, "b": 0, "c": ""}) == {"b": 0, "c": ""}


class TestToChunk:
    """Tests for chunk coercion."""

    def test_string(self) -> None:
        assert to_chunk("hi") == TextChunk(text="hi")

    def test_pair(self, palette: Palette) -> None:
        chunk = to_chunk(("hi", "error"), palette)
        assert chunk.text == "hi"
        assert chunk.color == palette["error"]

    def test_pair_with_missing_color(self) -> None:
        assert to_chunk(("hi", None)).color is None

    def test_positioned(self, palette: Palette) -> None:
        chunk = to_chunk(("hi", "#FF0000", "3", 4), palette)
        assert (chunk.pos_x, chunk.pos_y) == (3, 4)
        assert chunk.color.hex == "#FF0000"

    def test_identity(self) -> None:
        chunk = TextChunk(text="x")
        assert to_chunk(chunk) is chunk

    def test_color(self) -> None:
        color = Color.from_hex("#FF0000", name="red")
        assert to_chunk(color) == TextChunk(text="red", color=color)

    def test_fallbacks(self) -> None:
        assert to_chunk(None).text == ""
        assert to_chunk(12).text == "12"
        assert to_chunk({"a": 1}).text == "{'a': 1}"

    def test_to_chunks(self, palette: Palette) -> None:
        result = to_chunks(["a", ("b", "info")], palette)
        assert [c.text for c in result] == ["a", "b"]
        assert result[1].color.name == "info"


class TestToEffectSet:
    """Tests for effect set coercion."""

    def test_passthrough(self) -> None:
        effects = EffectSet(bold=True)
        assert to_effect_set(effects) is effects
        assert to_effect_set(None) is None

    def test_names(self) -> None:
        assert to_effect_set(["bold", "sparkle"]) == EffectSet(bold=True)
        assert to_effect_set("bold, italic") == EffectSet(bold=True, italic=True)

    def test_mapping_and_pairs(self) -> None:
        assert to_effect_set({"dim": True, "blink": False}) == EffectSet(dim=True)
        assert to_effect_set([("underline", True), ("bold", False)]) == EffectSet(underline=True)

    def test_garbage(self) -> None:
        assert to_effect_set(42) == EffectSet()


class TestToFormatRequest:
    """Tests for request coercion."""

    def test_passthrough(self) -> None:
        request = FormatRequest()
        assert to_format_request(request) is request

    def test_list(self) -> None:
        assert to_format_request(["a"]).chunks == ["a"]

    def test_mapping(self, palette: Palette) -> None:
        request = to_format_request({
            "chunks": "hi",
            "default_color": "error",
            "align": "CENTER",
            "manual_tabs": "2",
            "add_line": "both",
            "animation": ">",
            "mode": "table",
        }, palette)
        assert request.chunks == ["hi"]
        assert request.default_color == palette["error"]
        assert request.align is Align.CENTER
        assert request.manual_tabs == 2
        assert request.add_line is AddLine.BOTH
        assert request.animation == ">"
        assert request.mode is Mode.TABLE

    def test_mapping_defaults(self) -> None:
        request = to_format_request({})
        assert request.chunks == []
        assert request.default_color is None
        assert request.manual_tabs == -1
        assert request.align is Align.LEFT

    def test_single_value(self) -> None:
        assert to_format_request("hi").chunks == ["hi"]
        assert to_format_request(None).chunks == []

    def test_enum_parsing(self) -> None:
        assert to_align(Align.RIGHT) is Align.RIGHT
        assert to_align("center_block") is Align.CENTER_BLOCK
        assert to_align("diagonal") is Align.LEFT
        assert to_add_line(None) is AddLine.NONE
        assert to_mode("RAW") is Mode.RAW


class TestNormalize:
    """Tests for text, message and table normalization."""

    @pytest.mark.parametrize("text,mode,expected", [
        ("  HOLA ", "lower", "hola"),
        ("canción", "upper", "CANCION"),
        (" Ñandú ", None, "Nandu"),
        (None, "lower", ""),
    ])
    def test_normalize_text(self, text: object, mode: object, expected: str) -> None:
        assert normalize_text(text, mode) == expected

    def test_normalize_messages(self, palette: Palette) -> None:
        assert normalize_messages("hi") == [TextChunk(text="hi")]
        pair = normalize_messages(("Error", "error"), palette)
        assert pair[0].color == palette["error"]
        many = normalize_messages([("Error", "error"), ("Info", "info")], palette)
        assert [c.color.name for c in many] == ["error", "info"]
        assert normalize_messages(42) == []

    def test_normalize_table(self) -> None:
        rows = normalize_table([["A", "BB"], ["CCC", "D"], ["E"]])
        assert all(len(row) == 2 for row in rows)
        assert [c.text for c in rows[0]] == ["A  ", "BB"]
        assert [c.text for c in rows[1]] == ["CCC", "D "]
        assert [c.text for c in rows[2]] == ["E  ", "  "]

    def test_normalize_table_rejects_non_list(self) -> None:
        assert normalize_table("nope") == []
