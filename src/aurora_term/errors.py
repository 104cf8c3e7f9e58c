"""Exceptions raised by aurora-term.

Rendering never raises: bad colors, effects and tables fall back to
defaults. Errors surface only when the caller hands over structured data
that cannot be decoded (palette files, JSON payloads).
"""


class AuroraTermError(Exception):
    """Base class for all aurora-term errors."""


class PaletteConfigError(AuroraTermError):
    """A palette file or palette entry could not be decoded."""


class JsonPayloadError(AuroraTermError):
    """A JSON payload passed for pretty-printing is not valid JSON."""
