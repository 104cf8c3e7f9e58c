"""ANSI text effects (bold, italic, underline, ...)."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, fields
from typing import Optional

from aurora_term.core.constants import CSI, EFFECT_CODES, RESET

# Matches SGR sequences only (colors and effects)
_SGR_PATTERN = re.compile(r'\x1b\[[0-9;]*m')


@dataclass(frozen=True)
class EffectSet:
    """
    Flags for every supported effect. Unset effects are False.

    Field order is the order codes are emitted in by
    apply_effect_set().
    """
    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    hidden: bool = False
    strikethrough: bool = False
    link: bool = False

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "EffectSet":
        """Build a set from effect names; unknown names are ignored."""
        valid = {name for name in names if is_valid_effect(name)}
        return cls(**{name: True for name in valid})

    def active(self) -> list[str]:
        """Names of the enabled effects, in field order."""
        return [name for name in EFFECT_ORDER if getattr(self, name)]


# Emission order for EffectSet fields
EFFECT_ORDER: tuple[str, ...] = tuple(f.name for f in fields(EffectSet))


def available_effects() -> list[str]:
    """Sorted list of effect names."""
    return sorted(EFFECT_CODES)


def is_valid_effect(name: object) -> bool:
    """True if name is a known effect."""
    return isinstance(name, str) and name in EFFECT_CODES


def effect_code(name: str) -> Optional[str]:
    """Escape sequence for an effect, or None if unknown."""
    code = EFFECT_CODES.get(name)
    return f"{CSI}{code}m" if code is not None else None


def apply_effect(text: str, effect: str) -> str:
    """
    Wrap text in one effect and a reset.

    Unknown effects return text unchanged.

    Example:
        >>> apply_effect("Hi", "bold")
        '\\x1b[1mHi\\x1b[0m'
    """
    code = effect_code(effect)
    if code is None:
        return text
    return f"{code}{text}{RESET}"


def apply_effects(text: str, effects: Iterable[str]) -> str:
    """
    Prefix text with the codes of all known effects (in the given order)
    and append a single reset. Returns text unchanged if none resolve.
    """
    codes = "".join(code for code in map(effect_code, effects) if code)
    if not codes:
        return text
    return f"{codes}{text}{RESET}"


def apply_effect_set(text: str, effects: Optional[EffectSet]) -> str:
    """Apply the enabled effects of an EffectSet; None leaves text as is."""
    if effects is None:
        return text
    return apply_effects(text, effects.active())


def remove_effects(text: str) -> str:
    """Remove SGR sequences (effects and colors) from text."""
    return _SGR_PATTERN.sub("", text)
