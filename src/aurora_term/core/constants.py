"""Shared constants for ANSI text formatting."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
REVERSE_VIDEO = f"{CSI}7m"

# Spaces per indentation level
TAB_SIZE = 4

# Separator between table cells
CELL_SEPARATOR = "  "

# Indentation levels derived from a chunk's color name (automatic tabs)
COLOR_TABS: dict[str, int] = {
    "primary": 1,
    "secondary": 2,
    "ternary": 3,
    "quaternary": 4,
    "success": 5,
    "warning": 5,
    "error": 5,
    "info": 2,
    "debug": 1,
    "menu": 4,
    "no_color": 0,
}

# SGR codes for text effects ("link" shares underline's code)
EFFECT_CODES: dict[str, int] = {
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "underline": 4,
    "blink": 5,
    "reverse": 7,
    "hidden": 8,
    "strikethrough": 9,
    "link": 4,
}

# Number of stops in every generated gradient
GRADIENT_STEPS = 6

# Name of the universal fallback color
NO_COLOR = "no_color"
