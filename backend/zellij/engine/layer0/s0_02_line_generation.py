"""S0.02 — Line Generation.

Enumerate every grid line, optionally carve a focus motif out of the
enumeration, then retain random lines until the budget is spent.

The carving plans address lines by their index in the enumeration below:
horizontal, vertical, slope -1, slope +1. Changing that order breaks them.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import NamedTuple

from zellij.engine.context import Focus, ZellijContext
from zellij.engine.grid import Line
from zellij.engine.registry import Layer, stage
from zellij.utils.color import RandomSource
from zellij.utils.geometry import Point

logger = logging.getLogger(__name__)


class LineSet(NamedTuple):
    kept: list[Line]
    groups: list[list[Point]]
    unused: list[Line]


def candidate_lines(n: int) -> list[Line]:
    """All 6n+4 lines crossing a (2n+1)-sided grid, in carving order."""
    lines: list[Line] = []

    # Horizontal, from the left edge
    for i in range(n + 1):
        lines.append(Line(Point(0, 2 * i), Point(1, 0)))

    # Vertical, from the top edge
    for i in range(n + 1):
        lines.append(Line(Point(2 * i, 0), Point(0, 1)))

    # Slope -1: n+1 pointing NW, n pointing SE
    for i in range(n + 1):
        lines.append(Line(Point(2 * n, 2 * i), Point(-1, -1)))
    for i in range(n):
        lines.append(Line(Point(0, 2 * i + 2), Point(1, 1)))

    # Slope +1: n+1 from the left edge, n from the bottom edge
    for i in range(n + 1):
        lines.append(Line(Point(0, 2 * i), Point(1, -1)))
    for i in range(n):
        lines.append(Line(Point(2 * i + 2, 2 * n), Point(1, -1)))

    return lines


def _apply_plan(candidates: list[Line], kept: list[Line], plan: Sequence[tuple[int, bool]]) -> None:
    """Pop candidates[idx] step by step, moving the flagged ones to kept."""
    for idx, keep in plan:
        line = candidates.pop(idx)
        if keep:
            kept.append(line)


def carve_sixteen(n: int, candidates: list[Line], kept: list[Line], rng: RandomSource) -> list[Point]:
    """Carve a 16-pointed star cell; returns its 16 boundary vertices."""
    ax = math.floor(rng.random() * (n - 4)) + 2
    ay = math.floor(rng.random() * (n - 4)) + 2
    s = ax + ay
    d = ax - ay

    _apply_plan(candidates, kept, [
        (4 * n + 7 + s, False),
        (4 * n + 6 + s, True),
        (4 * n + 5 + s, False),
        (4 * n + 4 + s, False),
        (4 * n + 3 + s, False),
        (4 * n + 2 + s, True),
        (4 * n + 1 + s, False),

        (3 * n + 5 + d, False),
        (3 * n + 4 + d, True),
        (3 * n + 3 + d, False),
        (3 * n + 2 + d, False),
        (3 * n + 1 + d, False),
        (3 * n + 0 + d, True),
        (3 * n - 1 + d, False),

        (n + 1 + ay + 2, True),
        (n + 1 + ay + 1, False),
        (n + 1 + ay, False),
        (n + 1 + ay - 1, True),

        (ax + 2, True),
        (ax + 1, False),
        (ax, False),
        (ax - 1, True),
    ])

    return [
        Point(2 * ay + 1, 2 * ax - 3),
        Point(2 * ay - 2, 2 * ax - 2),
        Point(2 * ay, 2 * ax - 2),
        Point(2 * ay + 2, 2 * ax - 2),
        Point(2 * ay + 4, 2 * ax - 2),
        Point(2 * ay - 2, 2 * ax),
        Point(2 * ay + 4, 2 * ax),
        Point(2 * ay - 3, 2 * ax + 1),
        Point(2 * ay + 5, 2 * ax + 1),
        Point(2 * ay - 2, 2 * ax + 2),
        Point(2 * ay + 4, 2 * ax + 2),
        Point(2 * ay - 2, 2 * ax + 4),
        Point(2 * ay, 2 * ax + 4),
        Point(2 * ay + 2, 2 * ax + 4),
        Point(2 * ay + 4, 2 * ax + 4),
        Point(2 * ay + 1, 2 * ax + 5),
    ]


def carve_eight(n: int, candidates: list[Line], kept: list[Line], rng: RandomSource) -> list[Point]:
    """Carve a 2x2-vertex cell for an 8-pointed star; returns its 4 vertices."""
    if rng.random() < 0.5:
        # Axis-aligned square: drop the diagonals through it, keep its four sides.
        ax = math.floor(rng.random() * n)
        ay = math.floor(rng.random() * n)

        # Three slope -1 lines, then three slope +1 lines, through the cell's corners.
        k = (2 * n + 2) + (n - 1) + ax - ay
        removals = [k, k + 1, k + 2]
        removals.extend(4 * n + 3 + i + ax + ay for i in range(3))

        for idx in sorted(removals, reverse=True):
            del candidates[idx]

        group = [
            Point(2 * ay, 2 * ax),
            Point(2 * ay + 2, 2 * ax),
            Point(2 * ay, 2 * ax + 2),
            Point(2 * ay + 2, 2 * ax + 2),
        ]
        _apply_plan(candidates, kept, [
            (n + 1 + ay + 1, True),
            (n + 1 + ay, True),
            (ax + 1, True),
            (ax, True),
        ])
        return group

    # Diamond: drop axis lines through it, keep its four diagonal sides.
    a = math.floor(rng.random() * n)
    b = math.floor(rng.random() * (n - 1)) + 1

    if rng.random() < 0.5:
        del candidates[n + 1 + a + 1]
        del candidates[n + 1 + a]
        del candidates[b]
        group = [
            Point(2 * a + 1, 2 * b - 1),
            Point(2 * a + 1, 2 * b + 1),
            Point(2 * a, 2 * b),
            Point(2 * a + 2, 2 * b),
        ]
        plan = [4 * n + a + b + 1, 4 * n + a + b, 3 * n - 1 + b - a, 3 * n - 2 + b - a]
    else:
        del candidates[n + 1 + b]
        del candidates[a + 1]
        del candidates[a]
        group = [
            Point(2 * b, 2 * a),
            Point(2 * b, 2 * a + 2),
            Point(2 * b - 1, 2 * a + 1),
            Point(2 * b + 1, 2 * a + 1),
        ]
        plan = [4 * n + a + b + 1, 4 * n + a + b, 3 * n + a - b, 3 * n - 1 + a - b]

    _apply_plan(candidates, kept, [(idx, True) for idx in plan])
    return group


def create_lines(n: int, num: int, focus: Focus, rng: RandomSource) -> LineSet:
    """Choose the lines of one design.

    Lines kept by a focus carving count against ``num``; the rest of the budget
    is filled by uniform draws from the remaining candidates.
    """
    candidates = candidate_lines(n)
    kept: list[Line] = []
    groups: list[list[Point]] = []

    if focus is Focus.EIGHT:
        groups.append(carve_eight(n, candidates, kept, rng))
    elif focus is Focus.SIXTEEN:
        groups.append(carve_sixteen(n, candidates, kept, rng))

    num -= len(kept)

    while candidates and num > 0:
        ri = math.floor(rng.random() * len(candidates))
        kept.append(candidates.pop(ri))
        num -= 1

    return LineSet(kept=kept, groups=groups, unused=candidates)


@stage(
    id="S0.02",
    layer=Layer.CONSTRUCTION,
    dependencies=["S0.01"],
    description="Enumerate grid lines, carve the focus motif, retain random lines",
)
def line_generation(ctx: ZellijContext) -> None:
    features = ctx.features
    lineset = create_lines(features.density, features.num_lines, features.focus, ctx.rng)

    ctx.lines = lineset.kept
    ctx.groups = lineset.groups
    ctx.unused_lines = lineset.unused

    logger.debug(
        "Lines: %d kept, %d unused, %d focus group(s)",
        len(ctx.lines),
        len(ctx.unused_lines),
        len(ctx.groups),
    )
