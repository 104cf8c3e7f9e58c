"""Render JSON payloads as colored, indented terminal text.

Strings are treated as JSON documents and decoded first; any other value
is encoded directly. Malformed payloads raise JsonPayloadError rather
than being printed as-is.

Example output (render_json({"name": "Ana"}) with the "info" color):
ESC[38;2;...m{ESC[0m
ESC[38;2;...m  "name": "Ana"ESC[0m
ESC[38;2;...m}ESC[0m
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from aurora_term.core.color import apply_color
from aurora_term.errors import JsonPayloadError

logger = logging.getLogger(__name__)

# Extra indent added in front of every line by indent_block
BLOCK_INDENT = "  "


def _decode(payload: Any) -> Any:
    if not isinstance(payload, str):
        return payload
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise JsonPayloadError(f"Invalid JSON payload: {e}") from e


def _encode(data: Any, indent: Optional[int]) -> str:
    separators = (",", ":") if indent is None else None
    try:
        return json.dumps(data, indent=indent, separators=separators, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise JsonPayloadError(f"Value is not JSON serializable: {e}") from e


def pretty_json(payload: Any, indent: int = 2) -> str:
    """
    Pretty-print a JSON document or a JSON-serializable value.

    Raises:
        JsonPayloadError: If a string payload is not valid JSON or a
            value cannot be serialized
    """
    return _encode(_decode(payload), indent)


class JsonRenderer:
    """
    Render JSON payloads with a single color.

    Args:
        color: Any color input (palette name, hex, RGB tuple)
        compact: Emit on one line without whitespace
        indent_block: Indent every line by two extra spaces
        indent: Indent width for pretty output
    """

    def __init__(
        self,
        color: Any = "info",
        compact: bool = False,
        indent_block: bool = False,
        indent: int = 2,
    ):
        self.color = color
        self.compact = compact
        self.indent_block = indent_block
        self.indent = indent

    def to_text(self, data: Any) -> str:
        """Encode data as uncolored JSON text."""
        text = _encode(_decode(data), None if self.compact else self.indent)
        if self.indent_block:
            text = "\n".join(BLOCK_INDENT + line for line in text.split("\n"))
        return text

    def render(self, data: Any) -> str:
        """Encode data and color every line."""
        text = self.to_text(data)
        logger.debug("Rendering %d line(s) of JSON", text.count("\n") + 1)
        return "\n".join(apply_color(line, self.color) for line in text.split("\n"))


def render_json(
    data: Any,
    color: Any = "info",
    compact: bool = False,
    indent_block: bool = False,
) -> str:
    """
    Render data as colored JSON.

    Raises:
        JsonPayloadError: If the payload is malformed
    """
    return JsonRenderer(color=color, compact=compact, indent_block=indent_block).render(data)
