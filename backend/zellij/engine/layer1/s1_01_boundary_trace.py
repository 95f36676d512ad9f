"""S1.01 — Boundary Trace.

Walk every vertex (cell crossed by two or more lines) reachable from the first
one, building the polygon around it. Each polygon has one unit edge per line
direction at the vertex, perpendicular to that direction. A neighbour is pushed
together with the edge it shares with the current tile, and is translated onto
that edge when popped, so all tiles land in one coordinate frame without a
global embedding. Edges with no neighbour form the outer boundary.

Traversal uses an explicit stack; a cell may be pushed more than once and is
skipped once drawn.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from zellij.engine.context import Tile, ZellijContext
from zellij.engine.grid import DIR_VECS, INT_DIR_VECS, ORDERED_DIRS, Grid, Line, direction_index
from zellij.engine.registry import Layer, stage
from zellij.utils.geometry import Point, add, dist, scale, sub

logger = logging.getLogger(__name__)

Edge = tuple[Point, Point]


def used_directions(users: Iterable[Line]) -> set[int]:
    """Compass indices covered by the lines through a cell, both ways."""
    used: set[int] = set()
    for line in users:
        used.add(direction_index(line.dir))
        used.add(direction_index(scale(line.dir, -1)))
    return used


def local_polygon(used: set[int]) -> list[Point]:
    """Polygon around a vertex, starting at the origin."""
    pts: list[Point] = []
    last = Point(0.0, 0.0)
    for d in ORDERED_DIRS:
        if d in used:
            ddir = DIR_VECS[d]
            pts.append(last)
            last = add(last, Point(-ddir.y, ddir.x))
    return pts


def align_polygon(pts: list[Point], ap: Point, aq: Point, tolerance: float = 1e-5) -> list[Point]:
    """Translate pts so its edge running aq→ap lands exactly on the neighbour's edge ap→aq."""
    target = sub(ap, aq)
    n = len(pts)
    offset = Point(0.0, 0.0)
    for idx in range(n):
        v = sub(pts[(idx + 1) % n], pts[idx])
        if dist(v, target) < tolerance:
            offset = sub(aq, pts[idx])
            break
    return [add(p, offset) for p in pts]


def trace_tiles(grid: Grid, align_tolerance: float = 1e-5) -> tuple[list[Tile], list[Edge]]:
    """Tiles in visiting order and the unmatched (outer) edges."""
    tiles: list[Tile] = []
    boundary: list[Edge] = []

    start = grid.first_vertex()
    if start is None:
        return tiles, boundary

    # (cell, edge shared with the tile that pushed it)
    stack: list[tuple[Point, Edge | None]] = [(start, None)]

    while stack:
        pt, shared = stack.pop()
        cell = grid.cell(pt)
        if cell.drawn:
            continue
        cell.drawn = True

        used = used_directions(cell.users)
        pts = local_polygon(used)
        if shared is not None:
            pts = align_polygon(pts, shared[0], shared[1], align_tolerance)

        tiles.append(Tile(vertex=pt, path=pts))

        n = len(pts)
        vidx = 0
        for d in ORDERED_DIRS:
            if d not in used:
                continue
            edge = (pts[vidx], pts[(vidx + 1) % n])
            neigh = grid.find_neighbour(pt, INT_DIR_VECS[d])
            if neigh is None:
                boundary.append(edge)
            elif not grid.cell(neigh).drawn:
                stack.append((neigh, edge))
            vidx += 1

    return tiles, boundary


@stage(
    id="S1.01",
    layer=Layer.TILING,
    dependencies=["S0.03"],
    description="Trace tile polygons around every vertex and collect the outer boundary",
)
def boundary_trace(ctx: ZellijContext) -> None:
    ctx.tiles, ctx.boundary = trace_tiles(ctx.grid, ctx.config.align_tolerance)
    logger.debug("Traced %d tiles, %d boundary edges", len(ctx.tiles), len(ctx.boundary))
