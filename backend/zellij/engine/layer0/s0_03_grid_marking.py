"""S0.03 — Grid Marking.

Rasterise every retained line: each cell records the lines passing through it.
"""

from __future__ import annotations

import logging

from zellij.engine.context import ZellijContext
from zellij.engine.grid import Grid
from zellij.engine.registry import Layer, stage

logger = logging.getLogger(__name__)


@stage(
    id="S0.03",
    layer=Layer.CONSTRUCTION,
    dependencies=["S0.02"],
    description="Record which lines cross each grid cell",
)
def grid_marking(ctx: ZellijContext) -> None:
    grid = Grid(ctx.grid_side)
    grid.mark_lines(ctx.lines)
    ctx.grid = grid

    if logger.isEnabledFor(logging.DEBUG):
        vertices = int((grid.user_counts() >= 2).sum())
        logger.debug("Grid %dx%d, %d vertices:\n%s", grid.side, grid.side, vertices, grid.to_ascii())
