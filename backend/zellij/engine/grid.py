"""Square line grid: which retained lines pass through each cell."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from zellij.utils.geometry import Point, add, scale, sub

NO_GROUP = -1

# 3x3 compass enumeration, row-major, y pointing down; index 4 is the centre.
INT_DIR_VECS: tuple[Point, ...] = (
    Point(-1, -1), Point(0, -1), Point(1, -1),
    Point(-1, 0), Point(0, 0), Point(1, 0),
    Point(-1, 1), Point(0, 1), Point(1, 1),
)

_R22 = math.sqrt(2.0) * 0.5

# Same directions normalised to unit length.
DIR_VECS: tuple[Point, ...] = (
    Point(-_R22, -_R22), Point(0, -1), Point(_R22, -_R22),
    Point(-1, 0), Point(0, 0), Point(1, 0),
    Point(-_R22, _R22), Point(0, 1), Point(_R22, _R22),
)

# E, NE, N, NW, W, SW, S, SE: the winding order of every traced tile.
ORDERED_DIRS: tuple[int, ...] = (5, 2, 1, 0, 3, 6, 7, 8)


def direction_index(step: Point) -> int:
    """Index of an integer step in INT_DIR_VECS."""
    return int((step.y + 1) * 3 + (step.x + 1))


class Line(NamedTuple):
    """Infinite line through ``pos`` stepping by ``dir``."""

    pos: Point
    dir: Point


@dataclass
class GridCell:
    users: list[Line] = field(default_factory=list)
    drawn: bool = False
    group: int = NO_GROUP


class Grid:
    """Row-major side×side cells."""

    def __init__(self, side: int) -> None:
        self.side = side
        self.cells = [GridCell() for _ in range(side * side)]

    def contains(self, pt: Point) -> bool:
        return 0 <= pt.x < self.side and 0 <= pt.y < self.side

    def cell(self, pt: Point) -> GridCell:
        return self.cells[int(pt.y) * self.side + int(pt.x)]

    def num_users(self, pt: Point) -> int:
        return len(self.cell(pt).users)

    def mark_ray(self, line: Line, pos: Point, step: Point) -> None:
        while self.contains(pos):
            self.cell(pos).users.append(line)
            pos = add(pos, step)

    def mark_line(self, line: Line) -> None:
        """Record ``line`` in every cell it crosses, once per ray direction."""
        self.mark_ray(line, line.pos, line.dir)
        self.mark_ray(line, sub(line.pos, line.dir), scale(line.dir, -1))

    def mark_lines(self, lines: list[Line]) -> None:
        for line in lines:
            self.mark_line(line)

    def find_neighbour(self, pt: Point, step: Point) -> Point | None:
        """Nearest cell beyond ``pt`` along ``step`` where two or more lines meet."""
        pt = add(pt, step)
        while self.contains(pt):
            if self.num_users(pt) > 1:
                return pt
            pt = add(pt, step)
        return None

    def first_vertex(self) -> Point | None:
        """Row-major first cell crossed by two or more lines."""
        for y in range(self.side):
            for x in range(self.side):
                pt = Point(x, y)
                if self.num_users(pt) >= 2:
                    return pt
        return None

    def user_counts(self) -> NDArray[np.int64]:
        counts = np.array([len(c.users) for c in self.cells], dtype=np.int64)
        return counts.reshape(self.side, self.side)

    def to_ascii(self) -> str:
        """'.' empty, '+' one line, '#' a vertex (two or more lines)."""
        counts = self.user_counts()
        chars = np.where(counts >= 2, "#", np.where(counts == 1, "+", "."))
        return "\n".join("".join(row) for row in chars)
