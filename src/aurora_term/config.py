"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Fallback when the terminal size cannot be read
DEFAULT_WIDTH = 80

PALETTE_ENV = "AURORA_TERM_PALETTE"
LOG_LEVEL_ENV = "AURORA_TERM_LOG_LEVEL"
WIDTH_ENV = "AURORA_TERM_WIDTH"


@dataclass(frozen=True)
class Settings:
    """
    Process settings.

    Attributes:
        palette_path: JSON palette merged over the built-in colors
        log_level: Level name used by the CLI log handler
        fallback_width: Width used when the terminal size is unknown
    """
    palette_path: Optional[Path] = None
    log_level: str = "WARNING"
    fallback_width: int = DEFAULT_WIDTH

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from AURORA_TERM_* environment variables."""
        palette_path = None
        if env_path := os.environ.get(PALETTE_ENV):
            palette_path = Path(env_path).expanduser()

        log_level = os.environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper() or "WARNING"

        fallback_width = DEFAULT_WIDTH
        raw_width = os.environ.get(WIDTH_ENV, "")
        if raw_width.strip().isdigit() and int(raw_width) > 0:
            fallback_width = int(raw_width)

        return cls(
            palette_path=palette_path,
            log_level=log_level,
            fallback_width=fallback_width,
        )
