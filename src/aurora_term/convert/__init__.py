"""Lenient coercion of loosely typed input."""

from aurora_term.convert.ensure import (
    clean_nil_values,
    deep_merge,
    ensure,
    list_of,
    to_boolean,
    to_float,
    to_integer,
    to_list,
    to_map,
    to_string,
    to_symbol,
)
from aurora_term.convert.chunks import (
    normalize_messages,
    normalize_table,
    normalize_text,
    to_chunk,
    to_chunks,
    to_effect_set,
    to_format_request,
)

__all__ = [
    "clean_nil_values",
    "deep_merge",
    "ensure",
    "list_of",
    "to_boolean",
    "to_float",
    "to_integer",
    "to_list",
    "to_map",
    "to_string",
    "to_symbol",
    "normalize_messages",
    "normalize_table",
    "normalize_text",
    "to_chunk",
    "to_chunks",
    "to_effect_set",
    "to_format_request",
]
