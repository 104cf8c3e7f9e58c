"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator

import pytest

from aurora_term.config import LOG_LEVEL_ENV, PALETTE_ENV, WIDTH_ENV
from aurora_term.core.palette import Palette, active_palette
from aurora_term.render.formatter import Formatter


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """
    Isolate tests from AURORA_TERM_* variables in the caller's shell.

    The process palette is rebuilt for every test so palette overrides
    set by one test do not leak into the next.
    """
    for name in (PALETTE_ENV, LOG_LEVEL_ENV, WIDTH_ENV):
        monkeypatch.delenv(name, raising=False)
    active_palette.cache_clear()
    yield
    active_palette.cache_clear()


@pytest.fixture
def palette() -> Palette:
    """The built-in palette."""
    return Palette.builtin()


@pytest.fixture
def formatter(palette: Palette) -> Formatter:
    """Formatter with a fixed 20-column width."""
    return Formatter(palette=palette, width=20)
