"""Core data structures: colors, palette, gradients, effects and chunks."""

from aurora_term.core.chunk import AddLine, Align, FormatRequest, Mode, TextChunk
from aurora_term.core.color import Color, ColorInput, apply_color, darken, lighten, to_color
from aurora_term.core.effects import EffectSet, apply_effect, apply_effects
from aurora_term.core.gradient import apply_gradient_to_text, expand_to_six, gradient_between
from aurora_term.core.palette import Palette, active_palette, load_palette

__all__ = [
    "AddLine",
    "Align",
    "FormatRequest",
    "Mode",
    "TextChunk",
    "Color",
    "ColorInput",
    "apply_color",
    "darken",
    "lighten",
    "to_color",
    "EffectSet",
    "apply_effect",
    "apply_effects",
    "apply_gradient_to_text",
    "expand_to_six",
    "gradient_between",
    "Palette",
    "active_palette",
    "load_palette",
]
