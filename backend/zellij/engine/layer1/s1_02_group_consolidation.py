"""S1.02 — Group Consolidation.

The tiles around the vertices of a carved focus cell are replaced by one
composite polygon, the outline of their union.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from shapely.geometry import Polygon
from shapely.ops import unary_union

from zellij.engine.context import Tile, ZellijContext
from zellij.engine.grid import NO_GROUP, Grid
from zellij.engine.registry import Layer, stage
from zellij.utils.geometry import SEAM_TOLERANCE, Point, group_tiles

logger = logging.getLogger(__name__)

# Relative area difference tolerated between the outline and the member union.
_AREA_RTOL = 1e-6


def _check_outline(gid: int, members: Sequence[Sequence[Point]], outline: Sequence[Point]) -> None:
    if len(outline) < 3:
        logger.warning("Group %d collapsed to %d points", gid, len(outline))
        return
    merged = Polygon(outline)
    union = unary_union([Polygon(p) for p in members])
    if not merged.is_valid or abs(merged.area - union.area) > _AREA_RTOL * max(union.area, 1.0):
        logger.warning(
            "Group %d outline covers %.6f, its %d tiles cover %.6f",
            gid,
            merged.area,
            len(members),
            union.area,
        )


def consolidate_groups(
    grid: Grid,
    tiles: list[Tile],
    groups: list[list[Point]],
    tolerance: float = SEAM_TOLERANCE,
) -> list[Tile]:
    """Tag group cells, pull out their tiles and append one merged tile per group."""
    tiles = list(tiles)

    for gid, points in enumerate(groups):
        for pt in points:
            if grid.contains(pt):
                grid.cell(pt).group = gid

        members: list[list[Point]] = []
        for tidx in range(len(tiles) - 1, -1, -1):
            tile = tiles[tidx]
            if tile.group == NO_GROUP and grid.cell(tile.vertex).group == gid:
                members.append(tile.path)
                del tiles[tidx]

        if not members:
            logger.warning("Group %d has no traced tiles; skipped", gid)
            continue

        outline = group_tiles(members, tolerance)
        _check_outline(gid, members, outline)
        tiles.append(Tile(vertex=points[0], path=outline, group=gid))
        logger.debug("Group %d: %d tiles merged into a %d-gon", gid, len(members), len(outline))

    return tiles


@stage(
    id="S1.02",
    layer=Layer.TILING,
    dependencies=["S1.01"],
    description="Merge focus-group tiles into composite polygons",
)
def group_consolidation(ctx: ZellijContext) -> None:
    ctx.tiles = consolidate_groups(ctx.grid, ctx.tiles, ctx.groups, ctx.config.seam_tolerance)
