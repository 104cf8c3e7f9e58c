"""Renderers and helpers for producing terminal output."""

from aurora_term.render.ansi_text import strip_ansi, visible_length
from aurora_term.render.table import align_columns
from aurora_term.render.terminal import terminal_width
from aurora_term.render.formatter import Formatter, format_logo
from aurora_term.render.json_format import JsonRenderer, pretty_json, render_json

__all__ = [
    "strip_ansi",
    "visible_length",
    "align_columns",
    "terminal_width",
    "Formatter",
    "format_logo",
    "JsonRenderer",
    "pretty_json",
    "render_json",
]
