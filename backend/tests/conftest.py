"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from zellij.engine.grid import Grid, Line
from zellij.library import default_filler_library
from zellij.utils.geometry import Point

# Pure primaries, so every rendered colour is easy to check.
RGB_PALETTE = ("#000000", "#ffffff", "#ff0000", "#00ff00", "#0000ff")


class ScriptedRandom:
    """Random source replaying fixed values; fails loudly when exhausted."""

    def __init__(self, values: Sequence[float]) -> None:
        self._values = list(values)
        self.draws = 0

    def random(self) -> float:
        if self.draws >= len(self._values):
            raise AssertionError(f"unexpected draw #{self.draws + 1}")
        value = self._values[self.draws]
        self.draws += 1
        return value


def horizontal(y: int) -> Line:
    return Line(Point(0, y), Point(1, 0))


def vertical(x: int) -> Line:
    return Line(Point(x, 0), Point(0, 1))


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def rgb_palette() -> tuple[str, ...]:
    return RGB_PALETTE


@pytest.fixture
def library():
    return default_filler_library()


@pytest.fixture
def make_grid():
    """Grid of the given side with the given lines marked."""

    def _make(side: int, lines: Sequence[Line]) -> Grid:
        grid = Grid(side)
        grid.mark_lines(list(lines))
        return grid

    return _make


@pytest.fixture
def cross_grid(make_grid) -> Grid:
    """Side 5, one horizontal and one vertical line through (2, 2)."""
    return make_grid(5, [horizontal(2), vertical(2)])


@pytest.fixture
def block_grid(make_grid) -> Grid:
    """Side 5, two horizontal and two vertical lines: a 2x2 block of vertices."""
    return make_grid(5, [horizontal(2), horizontal(4), vertical(2), vertical(4)])


@pytest.fixture
def star_grid(make_grid) -> Grid:
    """Side 9, all four line directions through (4, 4)."""
    return make_grid(9, [
        horizontal(4),
        vertical(4),
        Line(Point(8, 8), Point(-1, -1)),
        Line(Point(0, 8), Point(1, -1)),
    ])
