"""Leaf-node geometry helpers: points, affine maps, boxes. No engine imports."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from zellij.errors import DataIntegrityError

logger = logging.getLogger(__name__)

# Endpoints closer than this are the same point when cancelling shared edges.
SEAM_TOLERANCE = 1e-4


class Point(NamedTuple):
    x: float
    y: float


class Affine(NamedTuple):
    """Affine map [[a, b, c], [d, e, f]] in homogeneous form."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float


class Box(NamedTuple):
    x: float
    y: float
    w: float
    h: float


IDENTITY = Affine(1.0, 0.0, 0.0, 0.0, 1.0, 0.0)


def add(p: Point, q: Point) -> Point:
    return Point(p.x + q.x, p.y + q.y)


def sub(p: Point, q: Point) -> Point:
    return Point(p.x - q.x, p.y - q.y)


def scale(p: Point, a: float) -> Point:
    return Point(p.x * a, p.y * a)


def dot(p: Point, q: Point) -> float:
    return p.x * q.x + p.y * q.y


def dist(p: Point, q: Point) -> float:
    dx = p.x - q.x
    dy = p.y - q.y
    return math.sqrt(dx * dx + dy * dy)


def compose(m: Affine, n: Affine) -> Affine:
    """Matrix product m·n: apply n first, then m."""
    return Affine(
        m.a * n.a + m.b * n.d,
        m.a * n.b + m.b * n.e,
        m.a * n.c + m.b * n.f + m.c,
        m.d * n.a + m.e * n.d,
        m.d * n.b + m.e * n.e,
        m.d * n.c + m.e * n.f + m.f,
    )


def apply_affine(m: Affine, p: Point) -> Point:
    return Point(m.a * p.x + m.b * p.y + m.c, m.d * p.x + m.e * p.y + m.f)


def apply_affine_path(m: Affine, coords: NDArray[np.float64]) -> NDArray[np.float64]:
    """Map an Nx2 array of points through m."""
    xs = coords[:, 0]
    ys = coords[:, 1]
    out = np.empty((len(coords), 2), dtype=np.float64)
    out[:, 0] = m.a * xs + m.b * ys + m.c
    out[:, 1] = m.d * xs + m.e * ys + m.f
    return out


def invert(m: Affine) -> Affine:
    det = m.a * m.e - m.b * m.d
    if det == 0.0 or not math.isfinite(det):
        raise DataIntegrityError(f"Affine map is singular (determinant {det})")
    return Affine(
        m.e / det,
        -m.b / det,
        (m.b * m.f - m.c * m.e) / det,
        -m.d / det,
        m.a / det,
        (m.c * m.d - m.a * m.f) / det,
    )


def match_seg(p: Point, q: Point) -> Affine:
    """Similarity sending (0, 0) to p and (1, 0) to q."""
    return Affine(q.x - p.x, p.y - q.y, p.x, q.y - p.y, q.x - p.x, p.y)


def match_two_segs(p1: Point, q1: Point, p2: Point, q2: Point) -> Affine:
    """Similarity sending segment p1→q1 onto p2→q2.

    Raises DataIntegrityError when p1→q1 has zero length.
    """
    return compose(match_seg(p2, q2), invert(match_seg(p1, q1)))


def translation(dx: float, dy: float) -> Affine:
    return Affine(1.0, 0.0, dx, 0.0, 1.0, dy)


def fill_box(b1: Box, b2: Box, rotate: bool = False) -> Affine:
    """Affine map letting box b1 fill box b2, centred and uniformly scaled.

    With ``rotate`` a 90 degree turn is used when it gives a larger scale.
    """
    if b1.w <= 0 or b1.h <= 0:
        raise DataIntegrityError(f"Cannot fit a degenerate box {tuple(b1)}")

    sc = min(b2.w / b1.w, b2.h / b1.h)
    rsc = min(b2.w / b1.h, b2.h / b1.w)

    to_target = translation(b2.x + 0.5 * b2.w, b2.y + 0.5 * b2.h)
    from_source = translation(-(b1.x + 0.5 * b1.w), -(b1.y + 0.5 * b1.h))

    if not rotate or sc > rsc:
        return compose(to_target, compose(Affine(sc, 0.0, 0.0, 0.0, sc, 0.0), from_source))

    turn = compose(Affine(rsc, 0.0, 0.0, 0.0, rsc, 0.0), Affine(0.0, -1.0, 0.0, 1.0, 0.0, 0.0))
    return compose(to_target, compose(turn, from_source))


def bounding_box(points: Iterable[Point]) -> Box:
    """Axis-aligned (x, y, w, h) box of a point set."""
    arr = np.asarray(list(points), dtype=np.float64)
    if len(arr) == 0:
        return Box(0.0, 0.0, 0.0, 0.0)
    xmin = float(np.min(arr[:, 0]))
    ymin = float(np.min(arr[:, 1]))
    return Box(xmin, ymin, float(np.max(arr[:, 0])) - xmin, float(np.max(arr[:, 1])) - ymin)


def group_tiles(paths: Sequence[Sequence[Point]], tolerance: float = SEAM_TOLERANCE) -> list[Point]:
    """Merge edge-adjacent polygons into the outline of their union.

    Every directed edge is collected; an edge whose reverse is already present
    cancels it (an interior seam). The surviving edges are chained end to start.
    Collinear vertices along the outline are kept.
    """
    segs: list[tuple[Point, Point]] = []

    for path in paths:
        n = len(path)
        for idx in range(n):
            p = path[idx]
            q = path[(idx + 1) % n]
            for sidx, (s0, s1) in enumerate(segs):
                if dist(s0, q) < tolerance and dist(s1, p) < tolerance:
                    del segs[sidx]
                    break
            else:
                segs.append((p, q))

    if not segs:
        return []

    outline = [segs[0][0]]
    last = segs[0][1]
    remaining = segs[1:]

    while remaining:
        for sidx, (s0, s1) in enumerate(remaining):
            if dist(s0, last) < tolerance:
                outline.append(s0)
                last = s1
                del remaining[sidx]
                break
        else:
            # Holes or disjoint pieces: keep the first closed loop.
            logger.warning("group_tiles: %d edges do not join the outline", len(remaining))
            break

    return outline
