"""
Total coercions.

Every function here accepts any value and returns the requested type,
falling back to that type's zero value instead of raising.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)

# Returned by to_symbol() when no name can be derived
UNKNOWN_SYMBOL = "unknown"


def to_string(value: Any) -> str:
    """
    Coerce to str.

    None becomes "", enum members their value, numbers their text and
    anything else its repr().
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Enum):
        return to_string(value.value)
    if isinstance(value, (int, float)):
        return str(value)
    return repr(value)


def to_integer(value: Any) -> int:
    """Coerce to int, 0 on failure. Strings must be a whole integer."""
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            logger.debug("Cannot parse %r as integer", value)
    return 0


def to_float(value: Any) -> float:
    """Coerce to float, 0.0 on failure."""
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            logger.debug("Cannot parse %r as float", value)
    return 0.0


def to_boolean(value: Any) -> bool:
    """Coerce to bool. Only True and the string 'true' are truthy."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def to_symbol(value: Any) -> str:
    """
    Coerce to a name.

    Strings are stripped, enum members give their value. Anything else
    (including blank strings) gives "unknown".
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str) and value.strip():
        return value.strip()
    return UNKNOWN_SYMBOL


def to_list(value: Any) -> list:
    """
    Coerce to list.

    None becomes [], lists are returned as is, anything else (tuples
    included) is wrapped in a one-element list.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def to_map(value: Any) -> dict:
    """
    Coerce to dict.

    None becomes {}, mappings are copied, lists of pairs are converted
    and anything else is wrapped as {"value": value}.
    """
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, list):
        try:
            return dict(value)
        except (TypeError, ValueError):
            logger.debug("List %r is not a list of pairs", value)
    return {"value": value}


_CASTS: dict[str, Callable[[Any], Any]] = {
    "string": to_string,
    "integer": to_integer,
    "float": to_float,
    "boolean": to_boolean,
    "symbol": to_symbol,
    "list": to_list,
    "map": to_map,
}


def ensure(value: Any, kind: str) -> Any:
    """
    Coerce value to the named kind.

    Kinds: string, integer, float, boolean, symbol, list, map. Unknown
    kinds return value unchanged.
    """
    cast = _CASTS.get(kind)
    return cast(value) if cast else value


def list_of(value: Any, kind: str) -> list:
    """Coerce to a list and every item to kind."""
    return [ensure(item, kind) for item in to_list(value)]


def deep_merge(base: Mapping, override: Mapping) -> dict:
    """Merge override into base, recursing where both sides hold mappings."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def clean_nil_values(mapping: Mapping) -> dict:
    """Drop keys whose value is None (top level only)."""
    return {key: value for key, value in mapping.items() if value is not None}
